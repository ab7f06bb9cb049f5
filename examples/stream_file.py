#!/usr/bin/env python3
"""Hex-dump a file through the public API, then decode it back."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import bytary


def main(path: Path) -> None:
    data = path.read_bytes()
    dump = io.BytesIO()
    with path.open("rb") as handle:
        result = bytary.convert_stream(
            "bytes", "hex", handle, dump, space_interval=2, wrap_interval=32
        )
    sys.stdout.write(dump.getvalue().decode("ascii"))
    print(f"\n{result.plan.describe()}: {result.bytes_written} hex digits")

    restored = bytary.convert_bytes("hex", "bytes", dump.getvalue())
    if restored != data:
        raise SystemExit("FAIL: round trip changed the data.")
    print("Round trip OK.")


if __name__ == "__main__":
    main(Path(sys.argv[1]))
