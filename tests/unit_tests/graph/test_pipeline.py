"""Unit tests for converter composition."""

from __future__ import annotations

import io

import pytest

from bytary.errors import InvalidInputDataError
from bytary.graph import builtins
from bytary.graph.pipeline import compose, copy_converter
from bytary.types import ByteSink, ByteSource


def _run(converter, data: bytes) -> bytes:
    output = io.BytesIO()
    converter(io.BytesIO(data), output)
    return output.getvalue()


def test_empty_chain_is_copy() -> None:
    assert compose([]) is copy_converter
    assert _run(compose([]), b"\x00\xffabc") == b"\x00\xffabc"


def test_single_hop_is_the_converter_itself() -> None:
    assert compose([builtins.bytes_to_hex]) is builtins.bytes_to_hex


def test_chain_runs_stages_in_order(sample: bytes) -> None:
    chain = compose([builtins.bytes_to_bin, builtins.bin_to_hex, builtins.hex_to_bytes])
    assert _run(chain, sample) == sample


def test_chain_matches_direct_conversion(sample: bytes) -> None:
    via_bin = compose([builtins.bytes_to_bin, builtins.bin_to_hex])
    assert _run(via_bin, sample) == _run(builtins.bytes_to_hex, sample)


def test_intermediate_buffers_are_not_shared() -> None:
    """Each stage receives a fresh buffer positioned at its start."""
    seen: list[int] = []

    def record(input: ByteSource, output: ByteSink) -> None:
        data = input.read()
        seen.append(id(input))
        output.write(data)

    chain = compose([record, record, record])
    assert _run(chain, b"xyz") == b"xyz"
    assert len(set(seen)) == 3


def test_failing_stage_aborts_chain() -> None:
    calls: list[str] = []

    def last(input: ByteSource, output: ByteSink) -> None:
        calls.append("last")

    chain = compose([builtins.hex_to_bytes, last])
    with pytest.raises(InvalidInputDataError):
        _run(chain, b"0x10")
    assert calls == []
