"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from bytary.formats import Format
from bytary.graph.base import FormatPath
from bytary.types import Converter


@dataclass(frozen=True)
class ConversionPlan:
    """Route chosen for one request and the converters along it."""

    source: Format
    target: Format
    path: FormatPath
    converters: tuple[Converter, ...]

    @property
    def is_copy(self) -> bool:
        """Whether the plan copies data without converting it."""
        return not self.converters

    def describe(self) -> str:
        """Return ``"bytes => bin => hex"`` style text, or ``"Copy data"``."""
        if self.is_copy:
            return "Copy data"
        return " => ".join(str(fmt) for fmt in self.path)


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome.

    ``bytes_written`` counts converted bytes passed to the output sink,
    excluding inserted separators.
    """

    plan: ConversionPlan
    bytes_written: int
