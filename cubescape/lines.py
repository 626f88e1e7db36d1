"""Reading a stream one line at a time, keeping each line's newline."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

Chunk = Union[str, bytes]


class LineReader:
    """Reads lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO, chunk_size: int = 4096) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._rest: Optional[Chunk] = None
        self._exhausted = False

    def _fill(self) -> None:
        while not self._exhausted:
            if self._rest:
                newline = b"\n" if isinstance(self._rest, bytes) else "\n"
                if newline in self._rest:
                    return
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._exhausted = True
                return
            self._rest = chunk if self._rest is None else self._rest + chunk

    def read_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream is used up."""
        self._fill()
        if not self._rest:
            return None
        newline = b"\n" if isinstance(self._rest, bytes) else "\n"
        end = self._rest.find(newline)
        if end < 0:
            line, self._rest = self._rest, self._rest[:0]
        else:
            line, self._rest = self._rest[: end + 1], self._rest[end + 1 :]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def iter_lines(stream: IO) -> Iterator[Chunk]:
    """Yield the lines of ``stream``, newlines included."""
    return iter(LineReader(stream))