"""JSON adapter."""

from __future__ import annotations

import json
from typing import Any

from praetorian.adapters.base import FileAdapter, located
from praetorian.adapters.canonical import type_name
from praetorian.exceptions import ConfigParseError
from praetorian.validator.models import ConfigFormat


class JsonFileAdapter(FileAdapter):
    format = ConfigFormat.json
    extensions = (".json",)

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigParseError(
                f"Invalid JSON syntax{located(source)}: {e}",
                file_path=source,
                details={"line": e.lineno},
            ) from e

        if not isinstance(parsed, dict):
            raise ConfigParseError(
                f"Invalid JSON content{located(source)}: "
                f"expected object, got {type_name(parsed)}",
                file_path=source,
            )
        return parsed
