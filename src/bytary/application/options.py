"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormattingOptions:
    """Separator configuration for the output sink."""

    space_interval: int = 0
    wrap_interval: int = 0

    def describe(self) -> str:
        return (
            f"space every {self.space_interval} bytes, "
            f"break line every {self.wrap_interval} bytes"
        )


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    formatting: FormattingOptions = FormattingOptions()
    converter_modules: tuple[str, ...] = ()
