"""Application use-cases orchestrating stream conversions."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import ValidationError

from bytary.application.options import ConversionOptions, FormattingOptions
from bytary.application.results import ConversionPlan, ConversionResult
from bytary.errors import InvalidRequestError, StreamIOError, UnsupportedConversionError
from bytary.formats import Format
from bytary.graph.pipeline import compose
from bytary.graph.registry import ConverterRegistry, create_default_registry
from bytary.graph.router import can_convert_between, path_to_converters, require_path
from bytary.schemas import ConversionRequestConfig
from bytary.sink import FormattedWriter
from bytary.types import ByteSink, ByteSource


def build_conversion_options(
    *,
    space_interval: int = 0,
    wrap_interval: int = 0,
    converter_modules: Iterable[str] | None = None,
) -> ConversionOptions:
    """Build typed conversion options from primitive arguments."""
    return ConversionOptions(
        formatting=FormattingOptions(
            space_interval=space_interval,
            wrap_interval=wrap_interval,
        ),
        converter_modules=tuple(converter_modules or ()),
    )


def parse_request(
    source: Format | str,
    target: Format | str,
    options: ConversionOptions,
) -> tuple[Format, Format]:
    """Validate request parameters and parse both format names.

    Raises
    ------
    InvalidRequestError
        If intervals or module names are invalid.
    InvalidFormatError
        If a format name is not recognized.
    """
    try:
        config = ConversionRequestConfig(
            source=str(source),
            target=str(target),
            space_interval=options.formatting.space_interval,
            wrap_interval=options.formatting.wrap_interval,
            converter_modules=list(options.converter_modules),
        )
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid conversion parameters: {exc}") from exc
    return Format.parse(config.source), Format.parse(config.target)


def plan_conversion(
    source: Format, target: Format, registry: ConverterRegistry
) -> ConversionPlan:
    """Use-case: choose the cheapest route between two formats.

    Raises
    ------
    UnsupportedConversionError
        If ``target`` cannot be reached from ``source``.
    """
    path = require_path(registry, source, target)
    converters = path_to_converters(registry, path)
    if converters is None:
        raise UnsupportedConversionError(source, target)
    return ConversionPlan(
        source=source,
        target=target,
        path=path,
        converters=tuple(converters),
    )


def execute_plan(
    plan: ConversionPlan,
    input: ByteSource,
    output: ByteSink,
    formatting: FormattingOptions,
) -> ConversionResult:
    """Use-case: stream ``input`` through ``plan`` into a formatted ``output``.

    Raises
    ------
    StreamIOError
        If reading or writing a stream fails.
    InvalidInputDataError
        If a decoding stage meets malformed text.
    """
    sink = FormattedWriter(
        output,
        space_interval=formatting.space_interval,
        wrap_interval=formatting.wrap_interval,
    )
    converter = compose(plan.converters)
    try:
        converter(input, sink)
        sink.flush()
    except OSError as exc:
        raise StreamIOError(f"I/O error: {exc}") from exc
    return ConversionResult(plan=plan, bytes_written=sink.position)


def run_conversion(
    *,
    source: Format | str,
    target: Format | str,
    input: ByteSource,
    output: ByteSink,
    options: ConversionOptions,
    registry: ConverterRegistry | None = None,
) -> ConversionResult:
    """Use-case: validate, route and run one conversion request."""
    source_format, target_format = parse_request(source, target, options)
    if registry is None:
        registry = create_default_registry(options.converter_modules)
    plan = plan_conversion(source_format, target_format, registry)
    return execute_plan(plan, input, output, options.formatting)


def list_convertible_formats(
    registry: ConverterRegistry, base: Format | None = None
) -> list[Format]:
    """Use-case: formats convertible both ways with ``base``, in enum order."""
    base = base or Format.default()
    return [fmt for fmt in Format if can_convert_between(registry, base, fmt)]
