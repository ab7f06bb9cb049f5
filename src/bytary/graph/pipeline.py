"""Compose direct converters into one streaming converter."""

from __future__ import annotations

import io
from collections.abc import Sequence

from bytary.graph.base import CHUNK_SIZE
from bytary.types import ByteSink, ByteSource, Converter


def copy_converter(input: ByteSource, output: ByteSink) -> None:
    """Copy ``input`` to ``output`` unchanged."""
    while True:
        chunk = input.read(CHUNK_SIZE)
        if not chunk:
            break
        output.write(chunk)


def compose(converters: Sequence[Converter]) -> Converter:
    """Chain converters so the output of each stage feeds the next.

    Intermediate stages are materialized into a fresh in-memory buffer each,
    because every converter does its own chunking. Only the last stage writes
    to the caller's output. An exception in any stage aborts the chain.

    Parameters
    ----------
    converters : Sequence[Converter]
        One-hop converters in path order.

    Returns
    -------
    Converter
        :func:`copy_converter` for an empty sequence, the converter itself for
        a single hop, otherwise a composed converter.
    """
    stages = tuple(converters)
    if not stages:
        return copy_converter
    if len(stages) == 1:
        return stages[0]

    def composed(input: ByteSource, output: ByteSink) -> None:
        current: ByteSource = input
        for stage in stages[:-1]:
            buffer = io.BytesIO()
            stage(current, buffer)
            buffer.seek(0)
            current = buffer
        stages[-1](current, output)

    return composed
