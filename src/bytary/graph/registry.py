"""Converter registry and converter-module discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import ModuleType

from pydantic import ValidationError

from bytary.errors import InvalidFormatError, RegistryError
from bytary.formats import Format
from bytary.graph import builtins
from bytary.graph.base import ConversionEdge, EdgeSpec
from bytary.schemas import ConversionEdgeConfig
from bytary.types import Converter

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """Directed weighted graph of direct conversions.

    Nodes are formats, edges are registered converters. Edges leaving a
    format are kept in insertion order, which makes routing deterministic.
    """

    def __init__(self) -> None:
        self._edges: dict[Format, dict[Format, ConversionEdge]] = {}

    def add_direct(
        self,
        source: Format,
        target: Format,
        converter: Converter,
        cost: int = 1,
    ) -> None:
        """Register or overwrite the edge ``source -> target``.

        Parameters
        ----------
        source : Format
            Input format of ``converter``.
        target : Format
            Output format of ``converter``.
        converter : Converter
            Streaming transformation.
        cost : int, default=1
            Positive routing weight.

        Raises
        ------
        RegistryError
            If any argument violates its type constraints.
        """
        try:
            config = ConversionEdgeConfig(
                source=source, target=target, converter=converter, cost=cost
            )
        except ValidationError as exc:
            raise RegistryError(
                f"Invalid conversion edge {source} => {target}: {exc}"
            ) from exc

        self._edges.setdefault(config.source, {})[config.target] = ConversionEdge(
            source=config.source,
            target=config.target,
            converter=converter,
            cost=config.cost,
        )
        logger.debug(
            "registered edge %s => %s (cost %d)", config.source, config.target, config.cost
        )

    def get_edge(self, source: Format, target: Format) -> ConversionEdge | None:
        """Return the edge ``source -> target`` if registered."""
        return self._edges.get(source, {}).get(target)

    def get_direct_edge(self, source: Format, target: Format) -> Converter | None:
        """Return the one-hop converter ``source -> target`` if registered."""
        edge = self.get_edge(source, target)
        return None if edge is None else edge.converter

    def neighbors(self, source: Format) -> list[ConversionEdge]:
        """Return edges leaving ``source`` in registration order."""
        return list(self._edges.get(source, {}).values())

    def edges(self) -> Iterator[ConversionEdge]:
        """Iterate over every registered edge."""
        for targets in self._edges.values():
            yield from targets.values()

    def size(self) -> int:
        """Return the total number of edges."""
        return sum(len(targets) for targets in self._edges.values())

    def __len__(self) -> int:
        return self.size()

    def load_module(self, module_or_path: str) -> None:
        """Load converter edges from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            converter modules from trusted sources.

        Parameters
        ----------
        module_or_path : str
            Python import path or filesystem path to a converter module.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)
        logger.debug("loaded converter module %s", module_or_path)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    RegistryError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise RegistryError(f"Unable to load converter module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise RegistryError(
                f"Unable to load converter module from {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise RegistryError(
            f"Unable to import converter module '{module_or_path}': {exc}"
        ) from exc


def _coerce_format(value: Format | str) -> Format:
    if isinstance(value, Format):
        return value
    try:
        return Format.parse(value)
    except InvalidFormatError as exc:
        raise RegistryError(f"Converter module declares {exc}") from exc


def _register_spec(spec: EdgeSpec, registry: ConverterRegistry) -> None:
    if not isinstance(spec, tuple) or len(spec) not in (3, 4):
        raise RegistryError(
            "Converter entries must be (source, target, converter[, cost]) tuples."
        )
    source, target, converter, *rest = spec
    registry.add_direct(
        _coerce_format(source), _coerce_format(target), converter, *rest
    )


def _register_from_module(module: ModuleType, registry: ConverterRegistry) -> None:
    """Register edge definitions found in module.

    Parameters
    ----------
    module : ModuleType
        Imported converter module.
    registry : ConverterRegistry
        Registry that receives the edges.
    """
    if hasattr(module, "register_converters"):
        module.register_converters(registry)
        return

    specs = getattr(module, "CONVERTERS", None)
    if specs is not None:
        for spec in specs:
            _register_spec(spec, registry)
        return

    spec = getattr(module, "CONVERTER", None)
    if spec is not None:
        _register_spec(spec, registry)
        return

    raise RegistryError(
        "Converter module must expose register_converters(registry), "
        "CONVERTERS, or CONVERTER."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> ConverterRegistry:
    """Create registry holding the built-in conversions.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional converter modules to load after the built-ins.

    Returns
    -------
    ConverterRegistry
        Registry with built-in and external edges.
    """
    registry = ConverterRegistry()
    builtins.register_converters(registry)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
