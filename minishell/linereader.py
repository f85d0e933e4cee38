"""Reading a stream line by line through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a stream, reading ``buffer_size`` units per call.

    Lines keep their trailing newline; the last line may lack one. Data read
    past a newline is kept for the next call. Works with binary and text streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing more."""
        parts: list[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk
            pending = self._pending
            newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
            cut = pending.find(newline)
            if cut >= 0:
                parts.append(pending[:cut + 1])
                self._pending = pending[cut + 1:]
                break
            parts.append(pending)
            self._pending = pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` until it is exhausted."""
    yield from LineReader(stream, buffer_size)