"""A doubly linked list whose nodes can be reached and edited directly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Release = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)

    def first(self) -> Node:
        """The first node of the chain this node belongs to."""
        node = self
        while node.prev is not None:
            node = node.prev
        return node

    def last(self) -> Node:
        """The last node of the chain this node belongs to."""
        node = self
        while node.next is not None:
            node = node.next
        return node


def _new_node(content: Any) -> Node:
    if content is None:
        raise ValueError("a list node needs content")
    return Node(content)


class LinkedList:
    """A doubly linked list of non-None contents."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None

    def nodes(self) -> Iterator[Node]:
        """Iterate over the nodes from first to last."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _require_member(self, node: Node) -> None:
        if not any(member is node for member in self.nodes()):
            raise ValueError("node does not belong to this list")

    def push_front(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = _new_node(content)
        if self._head is not None:
            node.next = self._head
            self._head.prev = node
        self._head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = _new_node(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
            node.prev = tail
        return node

    def insert_after(self, node: Node, content: Any) -> Node:
        """Insert ``content`` directly after ``node`` and return the new node."""
        self._require_member(node)
        added = _new_node(content)
        added.next = node.next
        added.prev = node
        if node.next is not None:
            node.next.prev = added
        node.next = added
        return added

    def remove(self, node: Node, release: Release = None) -> None:
        """Unlink ``node``, passing its content to ``release`` first if given."""
        self._require_member(node)
        if release is not None and node.content is not None:
            release(node.content)
        before, after = node.prev, node.next
        if before is not None:
            before.next = after
        else:
            self._head = after
        if after is not None:
            after.prev = before
        node.prev = node.next = None

    def clear(self, release: Release = None) -> None:
        """Empty the list, passing each content to ``release`` in order if given."""
        for node in self.nodes():
            if release is not None:
                release(node.content)
            node.prev = node.next = None
        self._head = None

    def first(self) -> Optional[Node]:
        """The first node, or None for an empty list."""
        return self._head

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        return None if self._head is None else self._head.last()

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())