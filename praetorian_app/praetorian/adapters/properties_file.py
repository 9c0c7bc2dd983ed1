"""Java ``.properties`` adapter."""

from __future__ import annotations

from typing import Any

from praetorian.adapters.base import FileAdapter
from praetorian.adapters.canonical import coerce_scalar
from praetorian.validator.models import ConfigFormat

_SEPARATORS = ("=", ":", " ")


def _logical_lines(text: str) -> list[str]:
    """Join backslash-continued lines and drop blanks and comments."""
    lines: list[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        if lines and lines[-1].endswith("\\"):
            lines[-1] = lines[-1][:-1] + line
        else:
            lines.append(line)
    return lines


def _split_pair(line: str) -> tuple[str, str] | None:
    for separator in _SEPARATORS:
        index = line.find(separator)
        if index > 0:
            return line[:index].strip(), line[index + 1:].strip()
        if index == 0:
            return None
    return line, ""


def parse_properties_content(text: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for line in _logical_lines(text):
        pair = _split_pair(line)
        if pair is None or not pair[0]:
            continue
        key, value = pair
        result[key] = coerce_scalar(value)
    return result


class PropertiesFileAdapter(FileAdapter):
    format = ConfigFormat.properties
    extensions = (".properties",)

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_properties_content(text or "")
