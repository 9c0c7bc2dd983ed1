"""INI adapter: ``[section]`` headers become nested mappings."""

from __future__ import annotations

from typing import Any

from praetorian.adapters.base import FileAdapter
from praetorian.adapters.canonical import coerce_scalar
from praetorian.validator.models import ConfigFormat


def parse_ini_content(text: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    section: dict[str, Any] = result

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith((";", "#")):
            continue

        if stripped.startswith("[") and stripped.endswith("]"):
            name = stripped[1:-1].strip()
            existing = result.get(name)
            if not isinstance(existing, dict):
                existing = result[name] = {}
            section = existing
            continue

        key, sep, value = stripped.partition("=")
        key = key.strip()
        if sep and key:
            section[key] = coerce_scalar(value.strip())

    return result


class IniFileAdapter(FileAdapter):
    format = ConfigFormat.ini
    extensions = (".ini", ".cfg", ".conf")

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_ini_content(text or "")
