"""Exceptions raised at the first-level entry points.

Adapters and the rule runner raise these; once inside the rule runner or the
audit engine, failures are reported as ``ValidationError`` entries instead.
"""

from __future__ import annotations

from typing import Any


class PraetorianError(Exception):
    """Base exception for all praetorian errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(PraetorianError):
    """Null or malformed input handed to an entry point."""


class ConfigFileNotFoundError(PraetorianError):
    """The configuration file path does not resolve to a file."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.file_path = file_path


class ConfigParseError(PraetorianError):
    """The configuration file content is malformed for its format."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.file_path = file_path


class UnsupportedFormatError(PraetorianError):
    """No registered adapter claims the file path."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        supported_extensions: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.file_path = file_path
        self.supported_extensions = supported_extensions or []


class AuditExecutionError(PraetorianError):
    """An audit category could not run to completion."""

    def __init__(self, message: str, category: str | None = None) -> None:
        super().__init__(message)
        self.category = category
