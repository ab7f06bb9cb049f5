"""Exception hierarchy shared by the conversion core, API and CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bytary.formats import Format


class BytaryError(Exception):
    """Base class for every error surfaced by ``bytary``.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error aborts a command.
    """

    exit_code = 1


class InvalidFormatError(BytaryError):
    """Raised when a format name matches none of the recognized formats."""

    exit_code = 2

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid format: '{name}'")
        self.name = name


class UnsupportedConversionError(BytaryError):
    """Raised when the conversion graph has no path between two formats."""

    exit_code = 3

    def __init__(self, source: Format, target: Format) -> None:
        super().__init__(f"Unsupported conversion: {source} => {target}")
        self.source = source
        self.target = target


class InvalidInputDataError(BytaryError):
    """Raised when encoded input text cannot be decoded.

    Parameters
    ----------
    detail : str
        Human-readable diagnostic.
    fragment : str | None, default=None
        Offending piece of input, when one can be isolated.
    """

    exit_code = 4

    def __init__(self, detail: str, fragment: str | None = None) -> None:
        message = detail if fragment is None else f"{detail}: {fragment!r}"
        super().__init__(message)
        self.detail = detail
        self.fragment = fragment


class StreamIOError(BytaryError):
    """Raised when the input or output stream fails; chains the ``OSError``."""

    exit_code = 5


class RegistryError(BytaryError):
    """Raised for invalid edge registrations or converter module loading."""


class InvalidRequestError(BytaryError):
    """Raised when conversion request parameters fail validation."""

    exit_code = 2
