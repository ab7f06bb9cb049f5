"""Application-layer use-cases and option objects."""

from __future__ import annotations

from bytary.application.options import ConversionOptions, FormattingOptions
from bytary.application.results import ConversionPlan, ConversionResult
from bytary.application.use_cases import (
    build_conversion_options,
    execute_plan,
    list_convertible_formats,
    parse_request,
    plan_conversion,
    run_conversion,
)

__all__ = [
    "ConversionOptions",
    "FormattingOptions",
    "ConversionPlan",
    "ConversionResult",
    "build_conversion_options",
    "execute_plan",
    "list_convertible_formats",
    "parse_request",
    "plan_conversion",
    "run_conversion",
]
