"""Public stream conversion API (delegates to application use-cases)."""

from __future__ import annotations

import io
from typing import Iterable
from typing import Optional

from bytary.application.results import ConversionResult
from bytary.application.use_cases import build_conversion_options
from bytary.application.use_cases import list_convertible_formats
from bytary.application.use_cases import parse_request
from bytary.application.use_cases import run_conversion
from bytary.formats import Format
from bytary.graph.base import FormatPath
from bytary.graph.registry import ConverterRegistry
from bytary.graph.registry import create_default_registry
from bytary.graph.router import require_path
from bytary.types import ByteSink
from bytary.types import ByteSource


def convert_stream(
    source: Format | str,
    target: Format | str,
    input: ByteSource,
    output: ByteSink,
    space_interval: int = 0,
    wrap_interval: int = 0,
    converter_modules: Optional[Iterable[str]] = None,
    registry: Optional[ConverterRegistry] = None,
) -> ConversionResult:
    """Convert ``input`` from ``source`` to ``target`` into ``output``."""
    options = build_conversion_options(
        space_interval=space_interval,
        wrap_interval=wrap_interval,
        converter_modules=converter_modules,
    )
    return run_conversion(
        source=source,
        target=target,
        input=input,
        output=output,
        options=options,
        registry=registry,
    )


def convert_bytes(
    source: Format | str,
    target: Format | str,
    data: bytes,
    space_interval: int = 0,
    wrap_interval: int = 0,
    converter_modules: Optional[Iterable[str]] = None,
) -> bytes:
    """Convert an in-memory payload and return the converted bytes."""
    output = io.BytesIO()
    convert_stream(
        source,
        target,
        io.BytesIO(data),
        output,
        space_interval=space_interval,
        wrap_interval=wrap_interval,
        converter_modules=converter_modules,
    )
    return output.getvalue()


def find_path(
    source: Format | str,
    target: Format | str,
    converter_modules: Optional[Iterable[str]] = None,
) -> FormatPath:
    """Return the route the default registry uses between two formats."""
    options = build_conversion_options(converter_modules=converter_modules)
    source_format, target_format = parse_request(source, target, options)
    registry = create_default_registry(options.converter_modules)
    return require_path(registry, source_format, target_format)


def list_formats(
    base: Format | str = Format.BYTES,
    converter_modules: Optional[Iterable[str]] = None,
) -> list[Format]:
    """Return formats convertible both ways with ``base``."""
    registry = create_default_registry(converter_modules)
    return list_convertible_formats(registry, Format.parse(str(base)))
