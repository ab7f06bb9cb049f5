"""Edge model shared by the registry, router and composer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from bytary.formats import Format
from bytary.types import Converter

CHUNK_SIZE = 1024

type EdgeSpec = (
    tuple[Format | str, Format | str, Converter]
    | tuple[Format | str, Format | str, Converter, int]
)
type FormatPath = tuple[Format, ...]


@dataclass(frozen=True)
class ConversionEdge:
    """One registered direct conversion.

    Parameters
    ----------
    source : Format
        Format the converter reads.
    target : Format
        Format the converter writes.
    converter : Converter
        Streaming transformation ``(input, output) -> None``.
    cost : int
        Positive weight used by the router.
    """

    source: Format
    target: Format
    converter: Converter
    cost: int = 1


class EdgeRegistrar(Protocol):
    """Anything converter modules can register edges with."""

    def add_direct(
        self,
        source: Format,
        target: Format,
        converter: Converter,
        cost: int = 1,
    ) -> None:
        """Register one directed edge."""
