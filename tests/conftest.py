"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from bytary.graph.registry import ConverterRegistry, create_default_registry

SAMPLE = bytes([0x00, 0xFF, 0x01, 0x20, 0x17, 0x1B, 0x34, 0x41, 0x65, 0x8F, 0x0E])


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def registry() -> ConverterRegistry:
    """Fresh registry holding the built-in topology."""
    return create_default_registry()


@pytest.fixture
def sample() -> bytes:
    """Bytes covering 0x00, 0xff and a spread of values in between."""
    return SAMPLE
