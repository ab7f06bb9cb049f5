#!/usr/bin/env python3
"""Example converter module adding a direct hex -> bin edge.

The built-in graph reaches bin from hex only through bytes. Loading this
module gives the router a one-hop alternative:

    bytary route hex bin --converter-module examples/hex_to_bin_plugin.py
"""

from __future__ import annotations

from bytary.errors import InvalidInputDataError
from bytary.formats import Format
from bytary.graph.base import CHUNK_SIZE
from bytary.graph.builtins import INSIGNIFICANT
from bytary.types import ByteSink, ByteSource

_NIBBLES = {f"{value:x}".encode(): f"{value:04b}".encode() for value in range(16)}


def hex_to_bin(input: ByteSource, output: ByteSink) -> None:
    """Expand every hex digit into four binary digits."""
    while True:
        chunk = input.read(CHUNK_SIZE)
        if not chunk:
            break
        digits = INSIGNIFICANT.sub(b"", chunk).lower()
        try:
            output.write(b"".join(_NIBBLES[digits[i : i + 1]] for i in range(len(digits))))
        except KeyError as exc:
            raise InvalidInputDataError("Invalid hex digit(s)", exc.args[0].decode("latin-1")) from exc


CONVERTER = (Format.HEX, Format.BIN, hex_to_bin)
