"""Abstract file adapter interface."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from praetorian.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidArgumentError,
)
from praetorian.validator.models import ConfigFile, ConfigFormat


class FileAdapter(ABC):
    """Parses one serialization format into a canonical tree.

    Subclasses declare ``format`` and ``extensions`` and implement ``parse``.
    """

    format: ClassVar[ConfigFormat]
    extensions: ClassVar[tuple[str, ...]] = ()

    def can_handle(self, path: Any) -> bool:
        """Return True if this adapter claims the path's extension. Never raises."""
        if not isinstance(path, (str, os.PathLike)):
            return False
        name = os.fspath(path)
        if not isinstance(name, str) or not name:
            return False
        return name.lower().endswith(self.extensions)

    def read(self, path: str | os.PathLike[str]) -> dict[str, Any]:
        """Read and parse a file.

        Raises:
            InvalidArgumentError: path is empty or not a path.
            ConfigFileNotFoundError: path does not resolve to a file.
            ConfigParseError: content is malformed for this format.
        """
        if not path or not isinstance(path, (str, os.PathLike)):
            raise InvalidArgumentError("File path is required")

        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigFileNotFoundError(
                f"File not found: {file_path}", file_path=str(file_path)
            )

        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(
                f"Failed to read file {file_path}: {e}", file_path=str(file_path)
            ) from e

        return self.parse(text, source=str(file_path))

    def read_config_file(self, path: str | os.PathLike[str]) -> ConfigFile:
        """Read a file and wrap the tree with its path and format."""
        content = self.read(path)
        return ConfigFile(path=os.fspath(path), format=self.format, content=content)

    @abstractmethod
    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        """Parse raw text into a canonical tree whose root is a mapping."""
        ...


def located(source: str | None) -> str:
    """Render the ' in <file>' suffix used in parse error messages."""
    return f" in {source}" if source else ""
