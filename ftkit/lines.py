"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    The stream is read ``buffer_size`` units at a time. Each line keeps its
    trailing newline; the last line may lack one. When nothing is left,
    ``read_line`` returns None, but a later call reads the stream again, so
    data that arrives afterwards is still picked up.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _newline_index(self) -> int:
        if self._stash is None:
            return -1
        newline = "\n" if isinstance(self._stash, str) else b"\n"
        return self._stash.find(newline)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has nothing more."""
        while self._newline_index() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = self._newline_index()
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1:]
        return stash[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line