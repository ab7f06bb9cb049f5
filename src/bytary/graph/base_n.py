"""Optional Base32/Base64 conversions.

Not part of the default topology. Load with
``create_default_registry(extra_modules=["bytary.graph.base_n"])`` or the
CLI ``--converter-module bytary.graph.base_n`` option.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Callable

from bytary.errors import InvalidInputDataError
from bytary.formats import Format
from bytary.graph.base import CHUNK_SIZE, EdgeRegistrar
from bytary.graph.builtins import INSIGNIFICANT
from bytary.types import ByteSink, ByteSource

# Chunk sizes are whole numbers of input blocks (3 bytes for base64, 5 for
# base32) so no padding is emitted before the final chunk.
BASE64_CHUNK = 1020
BASE32_CHUNK = 1025


def _encode_blocks(
    input: ByteSource,
    output: ByteSink,
    size: int,
    encode: Callable[[bytes], bytes],
) -> None:
    while True:
        chunk = input.read(size)
        if not chunk:
            break
        output.write(encode(chunk))


def _decode_blocks(
    input: ByteSource,
    output: ByteSink,
    name: str,
    width: int,
    decode: Callable[[bytes], bytes],
) -> None:
    pending = b""
    while True:
        chunk = input.read(CHUNK_SIZE)
        if not chunk:
            break
        text = pending + INSIGNIFICANT.sub(b"", chunk)
        usable = len(text) - len(text) % width
        pending = text[usable:]
        if usable:
            output.write(_checked(decode, text[:usable], name))
    if pending:
        output.write(_checked(decode, pending, name))


def _checked(decode: Callable[[bytes], bytes], text: bytes, name: str) -> bytes:
    try:
        return decode(text)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputDataError(
            f"Invalid {name} text ({exc})", text[:32].decode("latin-1")
        ) from exc


def bytes_to_base64(input: ByteSource, output: ByteSink) -> None:
    _encode_blocks(input, output, BASE64_CHUNK, base64.b64encode)


def base64_to_bytes(input: ByteSource, output: ByteSink) -> None:
    _decode_blocks(
        input, output, "base64", 4, lambda text: base64.b64decode(text, validate=True)
    )


def bytes_to_base32(input: ByteSource, output: ByteSink) -> None:
    _encode_blocks(input, output, BASE32_CHUNK, base64.b32encode)


def base32_to_bytes(input: ByteSource, output: ByteSink) -> None:
    _decode_blocks(
        input, output, "base32", 8, lambda text: base64.b32decode(text, casefold=True)
    )


def register_converters(registry: EdgeRegistrar) -> None:
    """Register Bytes<->Base32 and Bytes<->Base64 with unit cost."""
    registry.add_direct(Format.BYTES, Format.BASE64, bytes_to_base64)
    registry.add_direct(Format.BASE64, Format.BYTES, base64_to_bytes)
    registry.add_direct(Format.BYTES, Format.BASE32, bytes_to_base32)
    registry.add_direct(Format.BASE32, Format.BYTES, base32_to_bytes)
