"""JSON read/write helpers for scanner reports and gate output."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from vulngate.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def load_json_file(path: Path) -> object:
    """Load and parse a JSON document, tolerating a leading byte-order mark."""
    return json.loads(path.read_text(encoding="utf-8-sig"))


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Persist JSON by writing a sibling temp file and renaming it over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def append_output_variable(path: Path, name: str, value: str) -> None:
    """Append a ``name=value`` line to a CI output file such as ``$GITHUB_OUTPUT``."""
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{name}={value}\n")
