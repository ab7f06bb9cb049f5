#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    package = ROOT / "src/bytary"
    core = [
        *package.glob("*.py"),
        *(package / "graph").glob("*.py"),
        *(package / "application").glob("*.py"),
    ]
    for path in core:
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "sys.exit",
                "SystemExit",
                "print(",
            ],
        )

    graph_dir = package / "graph"
    for path in graph_dir.glob("*.py"):
        _assert_no_imports(path, ["bytary.application", "bytary.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
