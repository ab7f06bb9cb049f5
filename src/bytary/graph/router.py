"""Cheapest-path routing over the converter registry."""

from __future__ import annotations

import heapq
import itertools
import logging

from bytary.errors import UnsupportedConversionError
from bytary.formats import Format
from bytary.graph.base import FormatPath
from bytary.graph.registry import ConverterRegistry
from bytary.types import Converter

logger = logging.getLogger(__name__)


def find_shortest_path(
    registry: ConverterRegistry, source: Format, target: Format
) -> FormatPath | None:
    """Find the lowest-cost sequence of formats from ``source`` to ``target``.

    Dijkstra's algorithm over the registry, stopping as soon as ``target`` is
    settled. Neighbors are expanded in registration order and equal-cost heap
    entries pop in push order, so a fixed registry always yields the same
    path.

    Parameters
    ----------
    registry : ConverterRegistry
        Graph of direct conversions.
    source : Format
        Starting format.
    target : Format
        Goal format.

    Returns
    -------
    tuple[Format, ...] | None
        Path including both endpoints, ``(source,)`` when both are equal, or
        ``None`` when ``target`` is unreachable.
    """
    if source == target:
        return (source,)

    best: dict[Format, int] = {source: 0}
    previous: dict[Format, Format] = {}
    settled: set[Format] = set()
    order = itertools.count()
    heap: list[tuple[int, int, Format]] = [(0, next(order), source)]

    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled.add(node)
        if node == target:
            path = [target]
            while path[-1] != source:
                path.append(previous[path[-1]])
            path.reverse()
            logger.debug("route %s => %s: %s (cost %d)", source, target, path, cost)
            return tuple(path)
        for edge in registry.neighbors(node):
            candidate = cost + edge.cost
            known = best.get(edge.target)
            if edge.target in settled or (known is not None and candidate >= known):
                continue
            best[edge.target] = candidate
            previous[edge.target] = node
            heapq.heappush(heap, (candidate, next(order), edge.target))

    logger.debug("no route %s => %s", source, target)
    return None


def require_path(
    registry: ConverterRegistry, source: Format, target: Format
) -> FormatPath:
    """Like :func:`find_shortest_path` but raise when no path exists."""
    path = find_shortest_path(registry, source, target)
    if path is None:
        raise UnsupportedConversionError(source, target)
    return path


def path_to_converters(
    registry: ConverterRegistry, path: FormatPath
) -> list[Converter] | None:
    """Return the direct converters along ``path``, or ``None`` on a gap."""
    converters: list[Converter] = []
    for source, target in itertools.pairwise(path):
        converter = registry.get_direct_edge(source, target)
        if converter is None:
            return None
        converters.append(converter)
    return converters


def can_reach(registry: ConverterRegistry, source: Format, target: Format) -> bool:
    """Return whether ``target`` is reachable from ``source``."""
    return find_shortest_path(registry, source, target) is not None


def can_convert_between(
    registry: ConverterRegistry, first: Format, second: Format
) -> bool:
    """Return whether paths exist in both directions."""
    return can_reach(registry, first, second) and can_reach(registry, second, first)
