"""Shared type aliases and protocols for the conversion graph."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class ByteSource(Protocol):
    """Readable binary stream consumed by converters."""

    def read(self, size: int = -1, /) -> bytes: ...


class ByteSink(Protocol):
    """Writable binary stream converters write into."""

    def write(self, data: bytes, /) -> int | None: ...


type Converter = Callable[[ByteSource, ByteSink], None]
