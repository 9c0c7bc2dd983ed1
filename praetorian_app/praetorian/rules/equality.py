"""Structural drift detection across configuration files."""

from __future__ import annotations

import time
from typing import Iterable

from praetorian.rules.base import ConfigRule, RuleCategory, RuleSeverity
from praetorian.rules.key_paths import extract_key_paths, is_ignored
from praetorian.validator.models import (
    ConfigFile,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    WarningSeverity,
    check_counts,
)


class EqualityRule(ConfigRule):
    """Every file must carry the same set of key paths.

    A key missing from a file is an error on that file. A key present in a file
    but absent from at least one other file is also a warning on every file
    that has it, so one discrepancy surfaces as both.
    """

    def __init__(
        self,
        ignore_keys: Iterable[str] = (),
        rule_id: str = "equality",
        enabled: bool = True,
    ) -> None:
        super().__init__(
            rule_id,
            "Key equality",
            "All configuration files expose the same key paths",
            category=RuleCategory.compliance,
            severity=RuleSeverity.error,
            enabled=enabled,
        )
        self.ignore_keys = list(ignore_keys)

    def key_paths(self, file: ConfigFile) -> set[str]:
        paths = extract_key_paths(file.content)
        if self.ignore_keys:
            paths = {p for p in paths if not is_ignored(p, self.ignore_keys)}
        return paths

    async def execute(self, files: list[ConfigFile]) -> ValidationResult:
        started = time.monotonic()

        if len(files) < 2:
            return ValidationResult(
                success=True,
                warnings=[
                    ValidationWarning(
                        code="INSUFFICIENT_FILES",
                        message="Need at least 2 files to compare",
                        severity=WarningSeverity.warning,
                    )
                ],
                metadata=check_counts(
                    1, 1, 0,
                    filesCompared=len(files),
                    duration=_elapsed_ms(started),
                ),
            )

        file_keys = [(f.path, self.key_paths(f)) for f in files]

        all_keys: set[str] = set()
        for _, keys in file_keys:
            all_keys |= keys
        ordered_keys = sorted(all_keys)

        errors: list[ValidationError] = []
        for path, keys in file_keys:
            for key in ordered_keys:
                if key not in keys:
                    errors.append(
                        ValidationError(
                            code="MISSING_KEY",
                            message=f"Key '{key}' is missing in {path}",
                            path=key,
                            severity=ValidationSeverity.error,
                            context={"file": path, "missingKey": key},
                        )
                    )

        warnings: list[ValidationWarning] = []
        for index, (path, keys) in enumerate(file_keys):
            others = [k for i, (_, k) in enumerate(file_keys) if i != index]
            for key in sorted(keys):
                if any(key not in other for other in others):
                    warnings.append(
                        ValidationWarning(
                            code="EXTRA_KEY",
                            message=f"Key '{key}' is only present in {path}",
                            path=key,
                            severity=WarningSeverity.warning,
                            context={"file": path, "extraKey": key},
                        )
                    )

        success = not errors
        return ValidationResult(
            success=success,
            errors=errors,
            warnings=warnings,
            metadata=check_counts(
                1,
                1 if success else 0,
                0 if success else 1,
                filesCompared=len(files),
                totalKeys=len(all_keys),
                duration=_elapsed_ms(started),
            ),
        )


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
