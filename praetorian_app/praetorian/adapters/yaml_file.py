"""YAML adapter using ruamel.yaml."""

from __future__ import annotations

from typing import Any

from ruamel.yaml import YAML, YAMLError

from praetorian.adapters.base import FileAdapter, located
from praetorian.adapters.canonical import to_canonical, type_name
from praetorian.exceptions import ConfigParseError
from praetorian.validator.models import ConfigFormat


class YamlFileAdapter(FileAdapter):
    """Structured markup: native scalar typing, anchors and aliases resolved."""

    format = ConfigFormat.yaml
    extensions = (".yaml", ".yml")

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        if not text or not text.strip():
            return {}

        # The safe loader builds plain dicts/lists and expands aliases.
        yaml = YAML(typ="safe", pure=True)
        try:
            parsed = yaml.load(text)
        except YAMLError as e:
            line = None
            if getattr(e, "problem_mark", None) is not None:
                line = e.problem_mark.line + 1  # 0-indexed to 1-indexed
            raise ConfigParseError(
                f"Invalid YAML syntax{located(source)}: {e}",
                file_path=source,
                details={"line": line},
            ) from e

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigParseError(
                f"Invalid YAML content{located(source)}: "
                f"expected object, got {type_name(parsed)}",
                file_path=source,
            )

        return to_canonical(parsed)
