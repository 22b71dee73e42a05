"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

DEFAULT_BUFFER_SIZE = 42


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ..., /) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a stream in chunks of ``buffer_size``.

    Works with text and binary streams; lines keep their trailing newline.
    A read shorter than ``buffer_size`` ends the current fill, so a stream
    that delivers more data later can be read again.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while True:
            if self._pending is not None and self._newline in self._pending:
                return
            chunk = self._stream.read(self._buffer_size)
            if self._pending is None:
                self._pending = chunk[:0]
                self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            self._pending += chunk
            if len(chunk) != self._buffer_size:
                return

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` when nothing is left."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline)
        end = len(pending) if cut == -1 else cut + 1
        self._pending = pending[end:]
        return pending[:end]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line