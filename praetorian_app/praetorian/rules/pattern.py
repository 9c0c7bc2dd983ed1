"""Pattern rules: scalar values at key paths must match a regular expression."""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel

from praetorian.exceptions import InvalidArgumentError
from praetorian.rules.base import ConfigRule, RuleCategory, RuleSeverity
from praetorian.rules.key_paths import get_path
from praetorian.rules.patterns import PatternType, get_pattern_by_id, primary_pattern
from praetorian.validator.models import (
    ConfigFile,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    WarningSeverity,
    check_counts,
)

_FLAG_MAP = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}


class PatternRule(BaseModel):
    """One regular expression applied to the value at ``target_path``."""

    id: str
    name: str
    description: str = ""
    pattern: str
    target_path: str
    required: bool = False
    severity: RuleSeverity = RuleSeverity.error
    message: str | None = None
    flags: str = ""

    @classmethod
    def for_type(
        cls,
        pattern_type: PatternType | str,
        target_path: str,
        **overrides: Any,
    ) -> PatternRule:
        """Build a rule from the primary catalogue pattern of a type."""
        definition = primary_pattern(pattern_type)
        fields = definition.model_dump(exclude={"required"})
        fields.update(target_path=target_path, required=True)
        fields.update(overrides)
        return cls(**fields)

    @classmethod
    def from_catalogue(cls, pattern_id: str, target_path: str, **overrides: Any) -> PatternRule:
        definition = get_pattern_by_id(pattern_id)
        if definition is None:
            raise InvalidArgumentError(f"Unknown pattern id '{pattern_id}'")
        fields = definition.model_dump(exclude={"required"})
        fields.update(target_path=target_path, required=True)
        fields.update(overrides)
        return cls(**fields)

    @property
    def code(self) -> str:
        return f"PATTERN_MISMATCH_{self.id.upper()}"

    def compile(self) -> re.Pattern[str] | None:
        flags = 0
        for char in self.flags:
            flags |= _FLAG_MAP.get(char, 0)
        try:
            return re.compile(self.pattern, flags)
        except re.error:
            return None


def stringify(value: Any) -> str:
    """Render a canonical value the way it reads in a config file."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def _finding(
    rule: PatternRule, message: str, file_path: str, value: Any,
) -> ValidationError | ValidationWarning:
    context = {"file": file_path, "pattern": rule.pattern, "value": value}
    if rule.severity == RuleSeverity.error:
        return ValidationError(
            code=rule.code,
            message=message,
            path=rule.target_path,
            severity=ValidationSeverity.error,
            context=context,
        )
    return ValidationWarning(
        code=rule.code,
        message=message,
        path=rule.target_path,
        severity=WarningSeverity(rule.severity.value),
        context=context,
    )


def check_pattern(
    tree: dict[str, Any], rule: PatternRule, file_path: str = "",
) -> ValidationError | ValidationWarning | None:
    """Check one rule against one tree; ``None`` means it passed."""
    regex = rule.compile()
    if regex is None:
        return ValidationError(
            code=rule.code,
            message="Invalid regex pattern",
            path=rule.target_path,
            severity=ValidationSeverity.error,
            context={"file": file_path, "pattern": rule.pattern},
        )

    raw = get_path(tree, rule.target_path)
    if raw is None and not rule.required:
        return None

    value = stringify(raw)
    if regex.search(value):
        return None

    message = rule.message or (
        f"Value at '{rule.target_path}' does not match pattern: {rule.pattern}"
    )
    return _finding(rule, message, file_path, value)


class PatternMatchingRule(ConfigRule):
    """Applies a set of pattern rules to every file."""

    def __init__(
        self,
        rule_id: str,
        name: str,
        patterns: list[PatternRule],
        description: str = "",
        category: RuleCategory = RuleCategory.best_practice,
        enabled: bool = True,
    ) -> None:
        if not rule_id or not name:
            raise InvalidArgumentError("PatternMatchingRule requires id and name")
        if not patterns:
            raise InvalidArgumentError(
                "PatternMatchingRule requires at least one pattern rule"
            )
        super().__init__(
            rule_id,
            name,
            description or f"{len(patterns)} value pattern(s)",
            category=category,
            severity=RuleSeverity.error,
            enabled=enabled,
        )
        self._patterns = list(patterns)

    @property
    def patterns(self) -> list[PatternRule]:
        return list(self._patterns)

    def add_pattern(self, pattern: PatternRule) -> None:
        self._patterns.append(pattern)

    def remove_pattern(self, pattern_id: str) -> bool:
        before = len(self._patterns)
        self._patterns = [p for p in self._patterns if p.id != pattern_id]
        return len(self._patterns) < before

    async def execute(self, files: list[ConfigFile]) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        checked = passed = 0

        for file in files:
            for pattern in self._patterns:
                checked += 1
                finding = check_pattern(file.content, pattern, file.path)
                if finding is None:
                    passed += 1
                elif isinstance(finding, ValidationError):
                    errors.append(finding)
                else:
                    warnings.append(finding)

        return ValidationResult(
            success=not errors,
            errors=errors,
            warnings=warnings,
            metadata=check_counts(checked, passed, checked - passed),
        )
