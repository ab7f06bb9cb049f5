"""Output sink that spaces and wraps converted bytes."""

from __future__ import annotations

from bytary.types import ByteSink

SPACE = b" "
NEWLINE = b"\n"


class FormattedWriter:
    """Decorate a binary stream with separators at fixed output intervals.

    Every byte written is passed through unchanged. After each
    ``space_interval``-th byte a space is inserted and after each
    ``wrap_interval``-th byte a newline is inserted; when both fall on the
    same byte the space comes first. Intervals of ``0`` disable the
    corresponding separator.

    Parameters
    ----------
    target : ByteSink
        Underlying binary stream.
    space_interval : int, default=0
        Number of output bytes between spaces.
    wrap_interval : int, default=0
        Number of output bytes between newlines.

    Raises
    ------
    ValueError
        If an interval is negative.
    """

    def __init__(
        self,
        target: ByteSink,
        space_interval: int = 0,
        wrap_interval: int = 0,
    ) -> None:
        if space_interval < 0 or wrap_interval < 0:
            raise ValueError("space and wrap intervals must be non-negative.")
        self._target = target
        self.space_interval = space_interval
        self.wrap_interval = wrap_interval
        self.position = 0

    def writable(self) -> bool:
        return True

    def write(self, data: bytes) -> int:
        """Write ``data`` with separators and return ``len(data)``."""
        if not data:
            return 0
        if not self.space_interval and not self.wrap_interval:
            self._target.write(data)
            self.position += len(data)
            return len(data)

        out = bytearray()
        for byte in data:
            out.append(byte)
            self.position += 1
            if self.space_interval and self.position % self.space_interval == 0:
                out += SPACE
            if self.wrap_interval and self.position % self.wrap_interval == 0:
                out += NEWLINE
        self._target.write(bytes(out))
        return len(data)

    def flush(self) -> None:
        flush = getattr(self._target, "flush", None)
        if flush is not None:
            flush()
