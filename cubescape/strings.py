"""String search, comparison, slicing, joining, trimming and splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_NUL = "\0"


def _require_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    _require_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    _require_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _codes(text: str):
    """Yield character codes followed by an endless run of terminators."""
    yield from map(ord, text)
    while True:
        yield 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing character codes, 0 when equal."""
    for left, right in zip(_codes(a), _codes(b)):
        if left != right or left == 0:
            return left - right
    return 0  # pragma: no cover - the generators never run dry


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("length must not be negative")
    for _, left, right in zip(range(n), _codes(a), _codes(b)):
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strpbrk(text: str, accept: str) -> Optional[int]:
    """Index of the first character of ``text`` that appears in ``accept``."""
    wanted = set(accept)
    return next((i for i, ch in enumerate(text) if ch in wanted), None)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent."""
    if a is None and b is None:
        return None
    if a is None:
        return b
    if b is None:
        return a
    return a + b


def trim(text: str, chars: str) -> str:
    """Strip every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element, in place.

    When ``func`` returns a value other than None, that value replaces the
    element.
    """
    if isinstance(text, str):
        raise TypeError("striteri needs a mutable sequence of characters")
    for i, ch in enumerate(list(text)):
        replacement = func(i, ch)
        if replacement is not None:
            text[i] = replacement


def split_words(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between runs."""
    if sep == "" or sep == _NUL:
        return [text] if text else []
    _require_char(sep)
    return [word for word in text.split(sep) if word]