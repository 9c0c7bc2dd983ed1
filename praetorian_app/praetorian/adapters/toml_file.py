"""TOML adapter using the standard library parser."""

from __future__ import annotations

import tomllib
from typing import Any

from praetorian.adapters.base import FileAdapter, located
from praetorian.adapters.canonical import to_canonical
from praetorian.exceptions import ConfigParseError
from praetorian.validator.models import ConfigFormat


class TomlFileAdapter(FileAdapter):
    format = ConfigFormat.toml
    extensions = (".toml",)

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        try:
            parsed = tomllib.loads(text or "")
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(
                f"Invalid TOML syntax{located(source)}: {e}", file_path=source
            ) from e
        return to_canonical(parsed)
