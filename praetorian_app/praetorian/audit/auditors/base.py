"""Common machinery for audit categories."""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, ClassVar, Union

from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_counts,
)

Finding = Union[ValidationError, ValidationWarning]
Check = Callable[[ValidationContext], Union[list[Finding], Awaitable[list[Finding]]]]


def config_trees(context: ValidationContext) -> list[tuple[str, dict[str, Any]]]:
    """The trees a check should inspect: attached files, else the bare config."""
    if context.files:
        return [(f.path, f.content) for f in context.files]
    return [(context.project or "<config>", context.config)]


def last_segment(path: str) -> str:
    return path.rsplit(".", 1)[-1].lower()


class Auditor(ABC):
    """One audit category made of independent checks.

    Every check counts once toward rulesChecked. A check fails when it yields
    at least one error; warnings alone leave it passing.
    """

    category: ClassVar[str]

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def checks(self) -> list[Check]:
        ...

    async def audit(self, context: ValidationContext) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        checks = self.checks()
        passed = 0

        for check in checks:
            findings = check(context)
            if inspect.isawaitable(findings):
                findings = await findings
            check_errors = [f for f in findings if isinstance(f, ValidationError)]
            errors.extend(check_errors)
            warnings.extend(f for f in findings if isinstance(f, ValidationWarning))
            if not check_errors:
                passed += 1

        self._logger.debug(
            "%s audit: %d checks, %d errors, %d warnings",
            self.category, len(checks), len(errors), len(warnings),
        )
        return ValidationResult(
            success=not errors,
            errors=errors,
            warnings=warnings,
            metadata=check_counts(
                len(checks), passed, len(checks) - passed, auditType=self.category,
            ),
        )
