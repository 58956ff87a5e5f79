"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a binary or text stream, ``buffer_size`` units at a time.

    Each line keeps its terminating newline; the last line of a stream that
    does not end in a newline is returned without one.  Once the stream is
    exhausted, :meth:`read_line` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._separator: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the stream ends."""
        while (
            self._pending is None
            or self._separator is None
            or self._separator not in self._pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._separator is None:
                self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left."""
        self._fill()
        pending = self._pending
        if not pending or self._separator is None:
            self._pending = None
            return None
        cut = pending.find(self._separator)
        if cut < 0:
            self._pending = None
            return pending
        line = pending[: cut + 1]
        rest = pending[cut + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line