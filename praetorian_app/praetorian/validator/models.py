"""Validation data models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationSeverity(str, Enum):
    """Severity level for validation errors."""

    error = "error"
    critical = "critical"


class WarningSeverity(str, Enum):
    """Severity level for validation warnings."""

    warning = "warning"
    info = "info"


class ConfigFormat(str, Enum):
    """Serialization formats understood by the file adapters."""

    yaml = "yaml"
    env = "env"
    xml = "xml"
    json = "json"
    toml = "toml"
    ini = "ini"
    properties = "properties"
    hcl = "hcl"
    plist = "plist"


class ValidationError(BaseModel):
    """A finding that counts against the configuration."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    path: str | None = None
    severity: ValidationSeverity = ValidationSeverity.error
    context: dict[str, Any] = Field(default_factory=dict)


class ValidationWarning(BaseModel):
    """An advisory finding."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    path: str | None = None
    severity: WarningSeverity = WarningSeverity.warning
    context: dict[str, Any] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """Outcome of one rule, plugin or audit category execution."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def rules_checked(self) -> int:
        return int(self.metadata.get("rulesChecked") or 0)

    @property
    def rules_passed(self) -> int:
        return int(self.metadata.get("rulesPassed") or 0)

    @property
    def rules_failed(self) -> int:
        return int(self.metadata.get("rulesFailed") or 0)


class ConfigFile(BaseModel):
    """A parsed configuration file.

    ``content`` is the canonical tree: nested dicts and lists whose leaves are
    strings, numbers, booleans or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    format: ConfigFormat
    content: dict[str, Any] = Field(default_factory=dict)


class ValidationContext(BaseModel):
    """Everything a rule may consult besides the configuration itself."""

    config: dict[str, Any] = Field(default_factory=dict)
    environment: str = "development"
    project: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def files(self) -> list[ConfigFile]:
        """Config files attached for multi-file rules, if any."""
        files = self.metadata.get("files") or []
        return [f for f in files if isinstance(f, ConfigFile)]


def check_counts(checked: int, passed: int, failed: int, **extra: Any) -> dict[str, Any]:
    """Build the rulesChecked/rulesPassed/rulesFailed metadata block."""
    return {
        "rulesChecked": checked,
        "rulesPassed": passed,
        "rulesFailed": failed,
        **extra,
    }


def combine_results(results: list[ValidationResult], **metadata: Any) -> ValidationResult:
    """Concatenate child results in order and sum their check counters."""
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []
    checked = passed = failed = 0

    for result in results:
        errors.extend(result.errors)
        warnings.extend(result.warnings)
        checked += result.rules_checked
        passed += result.rules_passed
        failed += result.rules_failed

    return ValidationResult(
        success=all(r.success for r in results),
        errors=errors,
        warnings=warnings,
        metadata=check_counts(checked, passed, failed, **metadata),
    )
