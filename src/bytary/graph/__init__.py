"""Conversion graph: registry of direct converters, router and composer."""

from .base import ConversionEdge, FormatPath
from .pipeline import compose, copy_converter
from .registry import ConverterRegistry, create_default_registry
from .router import (
    can_convert_between,
    can_reach,
    find_shortest_path,
    path_to_converters,
    require_path,
)

__all__ = [
    "ConversionEdge",
    "ConverterRegistry",
    "FormatPath",
    "can_convert_between",
    "can_reach",
    "compose",
    "copy_converter",
    "create_default_registry",
    "find_shortest_path",
    "path_to_converters",
    "require_path",
]
