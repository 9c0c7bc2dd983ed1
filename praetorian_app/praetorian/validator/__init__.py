"""Validation models and the rule runner."""

from praetorian.validator.models import (
    ConfigFile,
    ConfigFormat,
    ValidationContext,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    WarningSeverity,
)
from praetorian.validator.runner import Validator

__all__ = [
    "ConfigFile",
    "ConfigFormat",
    "ValidationContext",
    "ValidationError",
    "ValidationResult",
    "ValidationSeverity",
    "ValidationWarning",
    "Validator",
    "WarningSeverity",
]
