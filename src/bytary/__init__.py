"""Top-level API for converting byte streams between text encodings."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from bytary.errors import (
    BytaryError,
    InvalidFormatError,
    InvalidInputDataError,
    StreamIOError,
    UnsupportedConversionError,
)
from bytary.formats import Format
from bytary.types import ByteSink, ByteSource

if TYPE_CHECKING:
    from bytary.graph.registry import ConverterRegistry

__version__ = "0.1.0"


def convert_stream(
    source: Format | str,
    target: Format | str,
    input: ByteSource,
    output: ByteSink,
    *,
    space_interval: int = 0,
    wrap_interval: int = 0,
    converter_modules: Iterable[str] | None = None,
    registry: ConverterRegistry | None = None,
):
    """Convert a byte stream between two formats.

    Parameters
    ----------
    source : Format | str
        Format of ``input``.
    target : Format | str
        Format written to ``output``.
    input
        Readable binary stream.
    output
        Writable binary stream; wrapped by the formatted output sink.
    space_interval : int, default=0
        Insert a space after every N output bytes (0 disables).
    wrap_interval : int, default=0
        Insert a newline after every N output bytes (0 disables).
    converter_modules : Iterable[str], optional
        Extra converter modules loaded into the registry.
    registry : ConverterRegistry, optional
        Prebuilt registry used instead of the default one.

    Returns
    -------
    ConversionResult
        Chosen plan and number of converted bytes written.
    """
    from .api import convert_stream as _impl

    return _impl(
        source,
        target,
        input,
        output,
        space_interval=space_interval,
        wrap_interval=wrap_interval,
        converter_modules=converter_modules,
        registry=registry,
    )


def convert_bytes(
    source: Format | str,
    target: Format | str,
    data: bytes,
    *,
    space_interval: int = 0,
    wrap_interval: int = 0,
    converter_modules: Iterable[str] | None = None,
) -> bytes:
    """Convert an in-memory payload between two formats."""
    from .api import convert_bytes as _impl

    return _impl(
        source,
        target,
        data,
        space_interval=space_interval,
        wrap_interval=wrap_interval,
        converter_modules=converter_modules,
    )


def find_path(
    source: Format | str,
    target: Format | str,
    *,
    converter_modules: Iterable[str] | None = None,
) -> tuple[Format, ...]:
    """Return the cheapest route between two formats."""
    from .api import find_path as _impl

    return _impl(source, target, converter_modules=converter_modules)


def list_formats(
    *,
    base: Format | str = Format.BYTES,
    converter_modules: Iterable[str] | None = None,
) -> list[Format]:
    """Return formats convertible both ways with ``base``."""
    from .api import list_formats as _impl

    return _impl(base=base, converter_modules=converter_modules)


__all__ = [
    "BytaryError",
    "Format",
    "InvalidFormatError",
    "InvalidInputDataError",
    "StreamIOError",
    "UnsupportedConversionError",
    "convert_bytes",
    "convert_stream",
    "find_path",
    "list_formats",
]
