"""JSON file helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from typing import Any


def read_json(path: str | Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def write_text_atomic(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Write text via temp file + atomic replace.

    Readers never observe a partially written file.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def sanitize_path_component(value: str) -> str:
    """Make a string safe to use as a single path component.

    Keeps alphanumerics, dash, underscore and dot; everything else becomes
    an underscore. Leading dots are stripped so results are never hidden
    files or parent references.
    """
    cleaned = "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in value)
    cleaned = cleaned.lstrip(".")
    return cleaned or "_"
