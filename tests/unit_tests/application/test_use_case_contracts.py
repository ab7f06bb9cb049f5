"""Unit tests for application use-case contracts."""

from __future__ import annotations

import io

import pytest

from bytary.application.options import FormattingOptions
from bytary.application.use_cases import (
    build_conversion_options,
    execute_plan,
    list_convertible_formats,
    parse_request,
    plan_conversion,
    run_conversion,
)
from bytary.errors import (
    InvalidFormatError,
    InvalidInputDataError,
    InvalidRequestError,
    StreamIOError,
    UnsupportedConversionError,
)
from bytary.formats import Format
from bytary.graph.registry import ConverterRegistry


class _BrokenSink:
    """Output stream whose writes always fail."""

    def write(self, data: bytes) -> int:
        raise OSError("disk full")


def test_build_conversion_options_defaults() -> None:
    options = build_conversion_options()
    assert options.formatting == FormattingOptions(0, 0)
    assert options.converter_modules == ()


def test_parse_request_accepts_names_and_members() -> None:
    options = build_conversion_options()
    assert parse_request("hex", Format.BYTES, options) == (Format.HEX, Format.BYTES)


def test_parse_request_rejects_unknown_format() -> None:
    with pytest.raises(InvalidFormatError, match="'base16'"):
        parse_request("base16", "hex", build_conversion_options())


def test_parse_request_does_not_strip_format_names() -> None:
    with pytest.raises(InvalidFormatError, match="' hex'"):
        parse_request(" hex", "bytes", build_conversion_options())
    with pytest.raises(InvalidFormatError):
        parse_request("hex", "bytes\n", build_conversion_options())


def test_parse_request_rejects_negative_intervals() -> None:
    """Wrap pydantic validation errors as InvalidRequestError."""
    options = build_conversion_options(space_interval=-2)
    with pytest.raises(InvalidRequestError, match="Invalid conversion parameters"):
        parse_request("bytes", "hex", options)


def test_plan_describes_route(registry: ConverterRegistry) -> None:
    plan = plan_conversion(Format.HEX, Format.BIN, registry)
    assert plan.path == (Format.HEX, Format.BYTES, Format.BIN)
    assert len(plan.converters) == 2
    assert plan.describe() == "hex => bytes => bin"
    assert not plan.is_copy


def test_plan_for_identical_formats_is_copy() -> None:
    plan = plan_conversion(Format.OCT, Format.OCT, ConverterRegistry())
    assert plan.is_copy
    assert plan.describe() == "Copy data"


def test_plan_unsupported_raises(registry: ConverterRegistry) -> None:
    with pytest.raises(UnsupportedConversionError):
        plan_conversion(Format.BASE64, Format.HEX, registry)


def test_execute_plan_formats_output(registry: ConverterRegistry) -> None:
    plan = plan_conversion(Format.BYTES, Format.HEX, registry)
    output = io.BytesIO()
    result = execute_plan(plan, io.BytesIO(b"\x1b\x34\x8f\xff"), output, FormattingOptions(2, 4))
    assert output.getvalue() == b"1b 34 \n8f ff \n"
    assert result.bytes_written == 8
    assert result.plan is plan


def test_execute_plan_wraps_os_errors(registry: ConverterRegistry) -> None:
    plan = plan_conversion(Format.BYTES, Format.HEX, registry)
    with pytest.raises(StreamIOError, match="disk full") as info:
        execute_plan(plan, io.BytesIO(b"\x01"), _BrokenSink(), FormattingOptions())
    assert isinstance(info.value.__cause__, OSError)


def test_run_conversion_identity_ignores_registry(sample: bytes) -> None:
    output = io.BytesIO()
    run_conversion(
        source="bin",
        target="bin",
        input=io.BytesIO(sample),
        output=output,
        options=build_conversion_options(),
        registry=ConverterRegistry(),
    )
    assert output.getvalue() == sample


def test_run_conversion_propagates_decode_errors() -> None:
    with pytest.raises(InvalidInputDataError):
        run_conversion(
            source="hex",
            target="bytes",
            input=io.BytesIO(b"1g"),
            output=io.BytesIO(),
            options=build_conversion_options(),
        )


def test_list_convertible_formats(registry: ConverterRegistry) -> None:
    assert list_convertible_formats(registry) == [
        Format.BYTES,
        Format.BIN,
        Format.HEX,
        Format.OCT,
    ]
    assert list_convertible_formats(ConverterRegistry(), Format.HEX) == [Format.HEX]
