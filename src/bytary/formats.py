"""Closed set of byte encodings understood by the conversion graph."""

from __future__ import annotations

from enum import StrEnum

from bytary.errors import InvalidFormatError


class Format(StrEnum):
    """Supported encodings, named by their canonical lowercase name.

    Members are ordered by declaration, which is also the order used when
    listing formats.
    """

    BYTES = "bytes"
    BIN = "bin"
    HEX = "hex"
    OCT = "oct"
    BASE32 = "base32"
    BASE64 = "base64"

    @classmethod
    def parse(cls, name: str) -> Format:
        """Parse a canonical format name.

        Parameters
        ----------
        name : str
            Lowercase format name such as ``"hex"``.

        Returns
        -------
        Format
            Matching format member.

        Raises
        ------
        InvalidFormatError
            If ``name`` is not a recognized format name.
        """
        try:
            return cls(name)
        except ValueError as exc:
            raise InvalidFormatError(name) from exc

    @classmethod
    def default(cls) -> Format:
        """Return the format assumed when none is given."""
        return cls.BYTES

    @classmethod
    def names(cls) -> list[str]:
        """Return every recognized name in declaration order."""
        return [member.value for member in cls]
