"""Apple property list adapter (XML and binary plists)."""

from __future__ import annotations

import os
import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from praetorian.adapters.base import FileAdapter, located
from praetorian.adapters.canonical import to_canonical, type_name
from praetorian.exceptions import ConfigParseError
from praetorian.validator.models import ConfigFormat


def parse_plist_bytes(data: bytes, source: str | None = None) -> dict[str, Any]:
    if not data.strip():
        return {}
    try:
        parsed = plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        raise ConfigParseError(
            f"Invalid plist{located(source)}: {e}", file_path=source
        ) from e

    if not isinstance(parsed, dict):
        raise ConfigParseError(
            f"Invalid plist content{located(source)}: "
            f"expected object, got {type_name(parsed)}",
            file_path=source,
        )
    # bytes values (<data>) have no canonical form; keep them as hex
    return to_canonical(_hex_bytes(parsed))


def _hex_bytes(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, dict):
        return {k: _hex_bytes(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_hex_bytes(v) for v in value]
    return value


class PlistFileAdapter(FileAdapter):
    format = ConfigFormat.plist
    extensions = (".plist",)

    def read(self, path: str | os.PathLike[str]) -> dict[str, Any]:
        # Binary plists are not UTF-8, so bypass the text read.
        if path and isinstance(path, (str, os.PathLike)) and Path(path).is_file():
            source = os.fspath(path)
            try:
                data = Path(path).read_bytes()
            except OSError as e:
                raise ConfigParseError(
                    f"Failed to read file {source}: {e}", file_path=source
                ) from e
            return parse_plist_bytes(data, source=source)
        return super().read(path)

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_plist_bytes((text or "").encode("utf-8"), source)
