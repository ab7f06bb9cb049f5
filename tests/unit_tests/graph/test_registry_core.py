"""Unit tests for converter registry edges and module loading helpers."""

from __future__ import annotations

import io
import types
from pathlib import Path

import pytest

from bytary.errors import RegistryError
from bytary.formats import Format
from bytary.graph.registry import (
    ConverterRegistry,
    _import_module_or_path,
    _register_from_module,
    create_default_registry,
)
from bytary.types import ByteSink, ByteSource


def _upper(input: ByteSource, output: ByteSink) -> None:
    output.write(input.read().upper())


def _lower(input: ByteSource, output: ByteSink) -> None:
    output.write(input.read().lower())


def test_empty_registry_has_no_edges() -> None:
    registry = ConverterRegistry()
    assert registry.size() == 0
    assert len(registry) == 0
    assert registry.get_direct_edge(Format.BYTES, Format.HEX) is None


def test_add_direct_registers_one_directed_edge() -> None:
    """Registering a -> b does not imply b -> a."""
    registry = ConverterRegistry()
    registry.add_direct(Format.HEX, Format.BIN, _upper, 3)
    assert registry.get_direct_edge(Format.HEX, Format.BIN) is _upper
    assert registry.get_direct_edge(Format.BIN, Format.HEX) is None
    edge = registry.get_edge(Format.HEX, Format.BIN)
    assert edge is not None
    assert (edge.source, edge.target, edge.cost) == (Format.HEX, Format.BIN, 3)


def test_add_direct_overwrites_existing_pair() -> None:
    registry = ConverterRegistry()
    registry.add_direct(Format.HEX, Format.BIN, _upper)
    registry.add_direct(Format.HEX, Format.BIN, _lower, 2)
    assert registry.size() == 1
    assert registry.get_direct_edge(Format.HEX, Format.BIN) is _lower


def test_neighbors_keep_registration_order() -> None:
    registry = ConverterRegistry()
    registry.add_direct(Format.BYTES, Format.OCT, _upper)
    registry.add_direct(Format.BYTES, Format.BIN, _upper)
    registry.add_direct(Format.BYTES, Format.HEX, _upper)
    assert [edge.target for edge in registry.neighbors(Format.BYTES)] == [
        Format.OCT,
        Format.BIN,
        Format.HEX,
    ]
    assert registry.neighbors(Format.HEX) == []


@pytest.mark.parametrize(
    ("source", "target", "converter", "cost"),
    [
        (Format.HEX, Format.BIN, _upper, 0),
        (Format.HEX, Format.BIN, _upper, -1),
        (Format.HEX, Format.BIN, _upper, True),
        (Format.HEX, Format.BIN, "not callable", 1),
        ("hex", Format.BIN, _upper, 1),
    ],
)
def test_add_direct_rejects_invalid_edges(
    source: object, target: object, converter: object, cost: object
) -> None:
    """Wrap pydantic validation errors as RegistryError."""
    with pytest.raises(RegistryError, match="Invalid conversion edge"):
        ConverterRegistry().add_direct(source, target, converter, cost)  # type: ignore[arg-type]


def test_import_module_by_path_and_register_variants(tmp_path: Path) -> None:
    """Load converter module from file path and register via CONVERTERS."""
    module_file = tmp_path / "upper_mod.py"
    module_file.write_text(
        "def upper(input, output):\n"
        "    output.write(input.read().upper())\n"
        "CONVERTERS = [('hex', 'hex', upper), ('hex', 'bin', upper, 5)]\n",
        encoding="utf-8",
    )
    module = _import_module_or_path(str(module_file))
    registry = ConverterRegistry()
    _register_from_module(module, registry)
    assert registry.size() == 2
    edge = registry.get_edge(Format.HEX, Format.BIN)
    assert edge is not None and edge.cost == 5


def test_import_module_invalid_path_spec_raises(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Raise RegistryError when file path exists but import spec is invalid."""
    module_file = tmp_path / "mod.py"
    module_file.write_text("x = 1\n", encoding="utf-8")
    monkeypatch.setattr(
        "bytary.graph.registry.importlib.util.spec_from_file_location",
        lambda *_args, **_kwargs: None,
    )
    with pytest.raises(RegistryError, match="Unable to load converter module"):
        _import_module_or_path(str(module_file))


def test_import_module_by_path_wraps_load_errors(tmp_path: Path) -> None:
    module_file = tmp_path / "broken.py"
    module_file.write_text("def oops(:\n", encoding="utf-8")
    with pytest.raises(RegistryError, match="Unable to load converter module from"):
        _import_module_or_path(str(module_file))


def test_import_module_by_name_failure_raises() -> None:
    with pytest.raises(RegistryError, match="Unable to import converter module"):
        _import_module_or_path("module.that.does.not.exist")


def test_register_from_module_uses_register_converters() -> None:
    """Prefer register_converters(registry) hook when available."""
    registry = ConverterRegistry()
    module = types.SimpleNamespace(
        register_converters=lambda r: r.add_direct(Format.OCT, Format.HEX, _upper)
    )
    _register_from_module(module, registry)  # type: ignore[arg-type]
    assert registry.get_direct_edge(Format.OCT, Format.HEX) is _upper


def test_register_from_module_with_single_converter() -> None:
    registry = ConverterRegistry()
    module = types.SimpleNamespace(CONVERTER=(Format.OCT, Format.BIN, _lower))
    _register_from_module(module, registry)  # type: ignore[arg-type]
    assert registry.get_direct_edge(Format.OCT, Format.BIN) is _lower


@pytest.mark.parametrize(
    "entry",
    [("hex", "bin"), ["hex", "bin", _upper], ("hex", "nope", _upper)],
)
def test_register_from_module_rejects_bad_entries(entry: object) -> None:
    module = types.SimpleNamespace(CONVERTERS=[entry])
    with pytest.raises(RegistryError):
        _register_from_module(module, ConverterRegistry())  # type: ignore[arg-type]


def test_register_from_module_requires_contract() -> None:
    with pytest.raises(RegistryError, match="must expose"):
        _register_from_module(types.SimpleNamespace(), ConverterRegistry())  # type: ignore[arg-type]


def test_registry_load_module_calls_import_and_register(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Execute load_module wrapper path through helper functions."""
    registry = ConverterRegistry()
    module = types.SimpleNamespace(CONVERTER=(Format.BIN, Format.OCT, _upper))
    monkeypatch.setattr(
        "bytary.graph.registry._import_module_or_path", lambda _path: module
    )
    registry.load_module("pkg.mod")
    assert registry.get_direct_edge(Format.BIN, Format.OCT) is _upper


def test_create_default_registry_loads_extra_modules(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    loaded: list[str] = []

    def fake_load_module(self: ConverterRegistry, module: str) -> None:
        loaded.append(module)

    monkeypatch.setattr(ConverterRegistry, "load_module", fake_load_module)
    registry = create_default_registry(extra_modules=["a.b", "c.d"])
    assert registry.size() == 6
    assert loaded == ["a.b", "c.d"]


def test_registered_converter_is_shared_not_copied() -> None:
    registry = ConverterRegistry()
    registry.add_direct(Format.HEX, Format.HEX, _upper)
    first = registry.get_direct_edge(Format.HEX, Format.HEX)
    second = registry.get_direct_edge(Format.HEX, Format.HEX)
    assert first is second is _upper
    output = io.BytesIO()
    assert first is not None
    first(io.BytesIO(b"ab"), output)
    assert output.getvalue() == b"AB"
