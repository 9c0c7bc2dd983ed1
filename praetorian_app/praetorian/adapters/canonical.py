"""Helpers that keep parsed content inside the canonical tree shape."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_TRUE_WORDS = {"true", "yes", "on"}
_FALSE_WORDS = {"false", "no", "off"}


def to_canonical(value: Any) -> Any:
    """Convert parser output to plain dicts, lists and JSON-like scalars.

    Date and time scalars become ISO-8601 strings; mapping keys become strings.
    """
    if isinstance(value, Mapping):
        return {str(k): to_canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_canonical(v) for v in value]
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def type_name(value: Any) -> str:
    """Name a parsed value's type in format-neutral terms."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"')


def strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding quotes, if present."""
    return value[1:-1] if is_quoted(value) else value


def coerce_scalar(value: str) -> Any:
    """Type an unquoted INI/properties value: booleans, then numbers, else string."""
    if not value:
        return ""
    if is_quoted(value):
        return value[1:-1]

    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False

    # "007" and friends stay strings
    if len(value) > 1 and value.startswith("0") and "." not in value:
        return value
    if _NUMBER_RE.match(value):
        if any(c in value for c in ".eE"):
            return float(value)
        return int(value)
    return value
