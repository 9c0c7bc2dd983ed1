"""Required key paths that every file must define."""

from __future__ import annotations

from typing import Iterable

from praetorian.rules.base import ConfigRule, RuleCategory, RuleSeverity
from praetorian.rules.key_paths import extract_key_paths
from praetorian.validator.models import (
    ConfigFile,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    check_counts,
)


class RequiredKeysRule(ConfigRule):
    def __init__(
        self,
        required_keys: Iterable[str],
        rule_id: str = "required-keys",
        enabled: bool = True,
    ) -> None:
        super().__init__(
            rule_id,
            "Required keys",
            "Configured key paths are present in every file",
            category=RuleCategory.compliance,
            severity=RuleSeverity.error,
            enabled=enabled,
        )
        self.required_keys = list(required_keys)

    async def execute(self, files: list[ConfigFile]) -> ValidationResult:
        errors: list[ValidationError] = []
        passed = 0

        for file in files:
            keys = extract_key_paths(file.content)
            missing = [k for k in self.required_keys if k not in keys]
            if not missing:
                passed += 1
            for key in missing:
                errors.append(
                    ValidationError(
                        code="MISSING_REQUIRED_KEY",
                        message=f"Required key '{key}' is missing in {file.path}",
                        path=key,
                        severity=ValidationSeverity.error,
                        context={"file": file.path, "requiredKey": key},
                    )
                )

        return ValidationResult(
            success=not errors,
            errors=errors,
            metadata=check_counts(
                len(files), passed, len(files) - passed,
                requiredKeys=len(self.required_keys),
            ),
        )
