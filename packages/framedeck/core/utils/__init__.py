"""Shared utilities for framedeck."""

from framedeck.core.utils.json import (
    read_json,
    sanitize_path_component,
    write_text_atomic,
)

__all__ = [
    "read_json",
    "sanitize_path_component",
    "write_text_atomic",
]
