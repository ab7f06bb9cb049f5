"""Built-in direct conversions between bytes and digit-text encodings.

Every converter streams its input in ``CHUNK_SIZE`` chunks and writes each
transformed chunk immediately. Decoders keep at most one incomplete digit
group between chunks, so memory stays bounded in both directions.
"""

from __future__ import annotations

import binascii
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bytary.errors import InvalidInputDataError
from bytary.formats import Format
from bytary.graph.base import CHUNK_SIZE, EdgeRegistrar
from bytary.types import ByteSink, ByteSource, Converter

# ASCII whitespace and control characters carry no digits.
INSIGNIFICANT = re.compile(rb"[\x00-\x20\x7f]+")


@dataclass(frozen=True)
class DigitGroups:
    """Fixed-width digit groups of a text encoding.

    Parameters
    ----------
    name : str
        Encoding name used in error messages.
    width : int
        Digits per group.
    radix : int
        Numeric base of the digits.
    invalid : re.Pattern[bytes]
        Matches characters outside the digit alphabet.
    maximum : int
        Largest value a single group may hold.
    """

    name: str
    width: int
    radix: int
    invalid: re.Pattern[bytes]
    maximum: int = 0xFF


HEX_GROUPS = DigitGroups("hex", 2, 16, re.compile(rb"[^0-9a-fA-F]+"))
OCT_GROUPS = DigitGroups("octal", 3, 8, re.compile(rb"[^0-7]+"))
NIBBLE_GROUPS = DigitGroups("binary", 4, 2, re.compile(rb"[^01]+"), maximum=0xF)


def _encode_chunks(
    input: ByteSource, output: ByteSink, encode: Callable[[bytes], bytes]
) -> None:
    while True:
        chunk = input.read(CHUNK_SIZE)
        if not chunk:
            break
        output.write(encode(chunk))


def _clean_digits(chunk: bytes, groups: DigitGroups) -> bytes:
    digits = INSIGNIFICANT.sub(b"", chunk)
    bad = groups.invalid.search(digits)
    if bad is not None:
        raise InvalidInputDataError(
            f"Invalid {groups.name} digit(s)",
            bad.group().decode("latin-1"),
        )
    return digits


def _parse_groups(digits: bytes, groups: DigitGroups) -> list[int]:
    values: list[int] = []
    for start in range(0, len(digits), groups.width):
        group = digits[start : start + groups.width]
        value = int(group, groups.radix)
        if value > groups.maximum:
            raise InvalidInputDataError(
                f"{groups.name.capitalize()} group out of range",
                group.decode("ascii"),
            )
        values.append(value)
    return values


def _decode_groups(
    input: ByteSource,
    output: ByteSink,
    groups: DigitGroups,
    emit: Callable[[Sequence[int]], bytes],
) -> None:
    """Decode fixed-width digit groups, left-padding a short trailing group."""
    pending = b""
    while True:
        chunk = input.read(CHUNK_SIZE)
        if not chunk:
            break
        digits = pending + _clean_digits(chunk, groups)
        usable = len(digits) - len(digits) % groups.width
        pending = digits[usable:]
        if usable:
            output.write(emit(_parse_groups(digits[:usable], groups)))
    if pending:
        padded = pending.rjust(groups.width, b"0")
        output.write(emit(_parse_groups(padded, groups)))


def _hex_digits(values: Sequence[int]) -> bytes:
    return "".join(f"{value:x}" for value in values).encode("ascii")


def bytes_to_hex(input: ByteSource, output: ByteSink) -> None:
    """Encode raw bytes as lowercase hexadecimal text."""
    _encode_chunks(input, output, binascii.hexlify)


def hex_to_bytes(input: ByteSource, output: ByteSink) -> None:
    """Decode hexadecimal text (any case, whitespace ignored) into bytes."""
    _decode_groups(input, output, HEX_GROUPS, bytes)


def bytes_to_oct(input: ByteSource, output: ByteSink) -> None:
    """Encode every byte as three octal digits."""
    _encode_chunks(
        input,
        output,
        lambda chunk: "".join(f"{byte:03o}" for byte in chunk).encode("ascii"),
    )


def oct_to_bytes(input: ByteSource, output: ByteSink) -> None:
    """Decode groups of three octal digits into bytes."""
    _decode_groups(input, output, OCT_GROUPS, bytes)


def bytes_to_bin(input: ByteSource, output: ByteSink) -> None:
    """Encode every byte as eight binary digits."""
    _encode_chunks(
        input,
        output,
        lambda chunk: "".join(f"{byte:08b}" for byte in chunk).encode("ascii"),
    )


def bin_to_hex(input: ByteSource, output: ByteSink) -> None:
    """Rewrite binary digits as hex, one hex digit per four binary digits."""
    _decode_groups(input, output, NIBBLE_GROUPS, _hex_digits)


BUILTIN_EDGES: tuple[tuple[Format, Format, Converter], ...] = (
    (Format.BYTES, Format.BIN, bytes_to_bin),
    (Format.BIN, Format.HEX, bin_to_hex),
    (Format.BYTES, Format.OCT, bytes_to_oct),
    (Format.OCT, Format.BYTES, oct_to_bytes),
    (Format.BYTES, Format.HEX, bytes_to_hex),
    (Format.HEX, Format.BYTES, hex_to_bytes),
)


def register_converters(registry: EdgeRegistrar) -> None:
    """Register the built-in topology with unit cost."""
    for source, target, converter in BUILTIN_EDGES:
        registry.add_direct(source, target, converter, 1)
