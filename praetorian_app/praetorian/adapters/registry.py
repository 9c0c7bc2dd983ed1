"""Format dispatch: the first adapter whose ``can_handle`` accepts a path wins."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Iterable

from praetorian.adapters.base import FileAdapter
from praetorian.adapters.env_file import EnvFileAdapter
from praetorian.adapters.hcl_file import HclFileAdapter
from praetorian.adapters.ini_file import IniFileAdapter
from praetorian.adapters.json_file import JsonFileAdapter
from praetorian.adapters.plist_file import PlistFileAdapter
from praetorian.adapters.properties_file import PropertiesFileAdapter
from praetorian.adapters.toml_file import TomlFileAdapter
from praetorian.adapters.xml_file import XmlFileAdapter
from praetorian.adapters.yaml_file import YamlFileAdapter
from praetorian.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidArgumentError,
    UnsupportedFormatError,
)
from praetorian.validator.models import ConfigFile, ValidationError, ValidationSeverity


def default_adapters() -> list[FileAdapter]:
    return [
        YamlFileAdapter(),
        JsonFileAdapter(),
        EnvFileAdapter(),
        TomlFileAdapter(),
        IniFileAdapter(),
        XmlFileAdapter(),
        PropertiesFileAdapter(),
        HclFileAdapter(),
        PlistFileAdapter(),
    ]


class AdapterRegistry:
    """Ordered set of file adapters; dispatch order is the list order."""

    def __init__(
        self,
        adapters: Iterable[FileAdapter] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapters: list[FileAdapter] = (
            list(adapters) if adapters is not None else default_adapters()
        )
        self._logger = logger or logging.getLogger(__name__)

    @property
    def adapters(self) -> list[FileAdapter]:
        return list(self._adapters)

    def register(self, adapter: FileAdapter) -> None:
        self._adapters.append(adapter)

    def supported_extensions(self) -> list[str]:
        return [ext for adapter in self._adapters for ext in adapter.extensions]

    def find_adapter(self, path: object) -> FileAdapter | None:
        for adapter in self._adapters:
            if adapter.can_handle(path):
                return adapter
        return None

    def is_supported(self, path: object) -> bool:
        return self.find_adapter(path) is not None

    def get_adapter(self, path: str | os.PathLike[str]) -> FileAdapter:
        adapter = self.find_adapter(path)
        if adapter is None:
            supported = self.supported_extensions()
            raise UnsupportedFormatError(
                f"Unsupported file format: {path}. "
                f"Supported extensions: {', '.join(supported)}",
                file_path=str(path),
                supported_extensions=supported,
            )
        return adapter

    def read_file(self, path: str | os.PathLike[str]) -> ConfigFile:
        """Read one file with the adapter that claims it.

        Raises the adapter's ``InvalidArgumentError``, ``ConfigFileNotFoundError``
        or ``ConfigParseError``, or ``UnsupportedFormatError``.
        """
        if not path:
            raise InvalidArgumentError("File path is required")
        adapter = self.get_adapter(path)
        config_file = adapter.read_config_file(path)
        self._logger.debug(
            "Read %s as %s (%d top-level keys)",
            config_file.path,
            config_file.format.value,
            len(config_file.content),
        )
        return config_file

    async def read_files(self, paths: list[str]) -> list[ConfigFile]:
        """Read several files concurrently; results keep the input order.

        The first failure propagates to the caller.
        """
        return list(
            await asyncio.gather(
                *(asyncio.to_thread(self.read_file, path) for path in paths)
            )
        )

    async def load_files(
        self, paths: list[str],
    ) -> tuple[list[ConfigFile], list[ValidationError]]:
        """Read files concurrently, turning per-file failures into errors.

        Returns the files that parsed (in input order) and one error per file
        that did not.
        """
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.read_file, path) for path in paths),
            return_exceptions=True,
        )

        files: list[ConfigFile] = []
        errors: list[ValidationError] = []
        for path, outcome in zip(paths, outcomes):
            if isinstance(outcome, ConfigFile):
                files.append(outcome)
                continue
            if not isinstance(outcome, Exception):
                raise outcome
            errors.append(_read_failure(str(path), outcome))
            self._logger.warning("Could not load %s: %s", path, outcome)

        return files, errors


def _read_failure(path: str, exc: Exception) -> ValidationError:
    if isinstance(exc, ConfigFileNotFoundError):
        code = "FILE_NOT_FOUND"
    elif isinstance(exc, UnsupportedFormatError):
        code = "UNSUPPORTED_FORMAT"
    elif isinstance(exc, (ConfigParseError, InvalidArgumentError)):
        code = "PARSE_ERROR"
    else:
        code = "FILE_READ_ERROR"

    return ValidationError(
        code=code,
        message=str(exc),
        path=path,
        severity=ValidationSeverity.error,
        context={"file": path},
    )
