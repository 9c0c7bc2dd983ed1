"""Compliance checks: required keys, empty values, key drift between files."""

from __future__ import annotations

import logging
from typing import Iterable

from praetorian.audit.auditors.base import Auditor, Check, Finding, config_trees
from praetorian.rules.equality import EqualityRule
from praetorian.rules.key_paths import extract_key_paths, is_ignored, iter_leaves
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationWarning,
)


class ComplianceAuditor(Auditor):
    category = "compliance"

    def __init__(
        self,
        required_keys: Iterable[str] = (),
        ignore_keys: Iterable[str] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        self.required_keys = list(required_keys)
        self.ignore_keys = list(ignore_keys)

    def checks(self) -> list[Check]:
        return [self.check_required_keys, self.check_empty_values, self.check_key_drift]

    def _required_keys(self, context: ValidationContext) -> list[str]:
        extra = context.metadata.get("requiredKeys") or []
        return list(dict.fromkeys([*self.required_keys, *extra]))

    def check_required_keys(self, context: ValidationContext) -> list[Finding]:
        required = self._required_keys(context)
        findings: list[Finding] = []
        if not required:
            return findings
        for source, tree in config_trees(context):
            present = extract_key_paths(tree)
            for key in required:
                if key not in present:
                    findings.append(
                        ValidationError(
                            code="COMPLIANCE_MISSING_REQUIRED_KEY",
                            message=f"Required key '{key}' is missing in {source}",
                            path=key,
                            context={"file": source, "requiredKey": key},
                        )
                    )
        return findings

    def check_empty_values(self, context: ValidationContext) -> list[Finding]:
        findings: list[Finding] = []
        for source, tree in config_trees(context):
            for path, value in iter_leaves(tree):
                if is_ignored(path, self.ignore_keys):
                    continue
                if value is None or (isinstance(value, str) and not value.strip()):
                    findings.append(
                        ValidationWarning(
                            code="COMPLIANCE_EMPTY_VALUE",
                            message=f"Key '{path}' has no value in {source}",
                            path=path,
                            context={"file": source},
                        )
                    )
        return findings

    async def check_key_drift(self, context: ValidationContext) -> list[Finding]:
        """Reuses the equality rule; only meaningful with two or more files."""
        files = context.files
        if len(files) < 2:
            return []
        result = await EqualityRule(ignore_keys=self.ignore_keys).execute(files)
        return [
            ValidationError(
                code="COMPLIANCE_KEY_DRIFT",
                message=error.message,
                path=error.path,
                severity=error.severity,
                context=error.context,
            )
            for error in result.errors
        ]
