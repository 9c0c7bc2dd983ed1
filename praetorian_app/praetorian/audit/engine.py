"""Audit engine: run categories concurrently and score the outcome."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Iterable

from praetorian.audit.auditors import AUDIT_CATEGORIES, Auditor, build_auditors
from praetorian.audit.models import AuditResult
from praetorian.audit.scoring import calculate_summary, failure_summary
from praetorian.exceptions import AuditExecutionError, InvalidArgumentError
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    check_counts,
)


class AuditEngine:
    """Runs a fixed list of audit categories against one validation context.

    The engine never raises from :meth:`audit`. Any failure while running a
    category turns the whole report into a single ``AUDIT_ERROR``.
    """

    def __init__(
        self,
        categories: Iterable[str] = AUDIT_CATEGORIES,
        auditors: dict[str, Auditor] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self.categories = list(categories)
        self._auditors = auditors if auditors is not None else build_auditors(logger=self._logger)

    @property
    def auditors(self) -> dict[str, Auditor]:
        return dict(self._auditors)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    async def audit(
        self,
        context: ValidationContext,
        categories: Iterable[str] | None = None,
    ) -> AuditResult:
        started = time.monotonic()
        timestamp = datetime.now(timezone.utc)
        names = list(categories) if categories is not None else self.categories

        try:
            if not isinstance(context, ValidationContext):
                raise InvalidArgumentError("Audit context must be a ValidationContext")

            outcomes = await asyncio.gather(
                *(self._run_category(name, context) for name in names),
                return_exceptions=True,
            )
            for name, outcome in zip(names, outcomes):
                if isinstance(outcome, BaseException):
                    raise AuditExecutionError(str(outcome), category=name) from outcome

            results: list[ValidationResult] = list(outcomes)
            summary = calculate_summary(results)
        except Exception as exc:
            self._logger.exception("Audit failed")
            return self._failed(exc, timestamp, started)

        self._logger.info(
            "Audit of %d categories scored %d (%s)",
            len(names), summary.score, summary.grade.value,
        )
        return AuditResult(
            timestamp=timestamp,
            duration=_elapsed_ms(started),
            results=results,
            summary=summary,
        )

    async def _run_category(self, name: str, context: ValidationContext) -> ValidationResult:
        auditor = self._auditors.get(name)
        if auditor is None:
            return ValidationResult(
                success=True,
                warnings=[
                    ValidationWarning(
                        code="UNKNOWN_AUDIT_TYPE",
                        message=f"Unknown audit type: {name}",
                        context={"auditType": name},
                    )
                ],
                metadata=check_counts(0, 0, 0, auditType=name),
            )
        return await auditor.audit(context.model_copy(deep=True))

    @staticmethod
    def _failed(exc: Exception, timestamp: datetime, started: float) -> AuditResult:
        details: dict = {"error": str(exc)}
        if isinstance(exc, AuditExecutionError) and exc.category:
            details["auditType"] = exc.category
        result = ValidationResult(
            success=False,
            errors=[
                ValidationError(
                    code="AUDIT_ERROR",
                    message=f"Audit execution failed: {exc}",
                    severity=ValidationSeverity.critical,
                    context=details,
                )
            ],
            metadata={"error": str(exc)},
        )
        return AuditResult(
            timestamp=timestamp,
            duration=_elapsed_ms(started),
            results=[result],
            summary=failure_summary(),
        )


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
