"""Dotenv-style adapter: one ``KEY=value`` per line, every value a string."""

from __future__ import annotations

import os
from typing import Any

from praetorian.adapters.base import FileAdapter
from praetorian.adapters.canonical import strip_quotes
from praetorian.validator.models import ConfigFormat


def parse_env_lines(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines.

    Lines end at a newline only; other Unicode line breaks stay inside values.
    Blank lines and ``#`` comments are skipped. Lines without ``=`` or with an
    empty key are ignored, not reported. One matching pair of surrounding
    quotes is stripped; mismatched quoting is kept as-is.
    """
    result: dict[str, str] = {}

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        key = key.strip()
        if not sep or not key:
            continue

        result[key] = strip_quotes(value.strip())

    return result


class EnvFileAdapter(FileAdapter):
    format = ConfigFormat.env
    extensions = (".env",)

    def can_handle(self, path: Any) -> bool:
        if super().can_handle(path):
            return True
        if not isinstance(path, (str, os.PathLike)):
            return False
        name = os.path.basename(os.fspath(path))
        return isinstance(name, str) and name.startswith((".env.", "env."))

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_env_lines(text or "")
