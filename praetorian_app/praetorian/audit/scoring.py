"""Turn category results into a 0-100 score, a letter grade and recommendations."""

from __future__ import annotations

import math

from praetorian.audit.models import AuditSummary, Grade
from praetorian.validator.models import ValidationResult, ValidationSeverity

GRADE_THRESHOLDS: list[tuple[int, Grade]] = [
    (90, Grade.A),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
]


def compute_score(passed_checks: int, total_checks: int) -> int:
    """Percentage of passed checks, rounded half up. No checks scores 100."""
    if total_checks <= 0:
        return 100
    return int(math.floor(passed_checks / total_checks * 100 + 0.5))


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def calculate_summary(results: list[ValidationResult]) -> AuditSummary:
    total = passed = failed = warnings = 0
    critical = security = compliance = 0
    recommendations: list[str] = []

    for result in results:
        total += result.rules_checked
        passed += result.rules_passed
        failed += result.rules_failed
        warnings += len(result.warnings)

        for error in result.errors:
            if error.severity == ValidationSeverity.critical:
                critical += 1
            # Bucketed by code text, whatever category produced the error.
            if "SECURITY" in error.code:
                security += 1
            if "COMPLIANCE" in error.code:
                compliance += 1

        if result.errors:
            category = result.metadata.get("auditType") or "unknown"
            recommendations.append(
                f"Fix {len(result.errors)} issues in {category} audit"
            )

    score = compute_score(passed, total)
    return AuditSummary(
        score=score,
        grade=grade_for(score),
        critical_issues=critical,
        security_issues=security,
        compliance_issues=compliance,
        recommendations=recommendations,
        total_checks=total,
        passed_checks=passed,
        failed_checks=failed,
        warnings=warnings,
    )


def failure_summary() -> AuditSummary:
    """Summary reported when the audit itself could not run."""
    return AuditSummary(
        score=0,
        grade=Grade.F,
        critical_issues=1,
        recommendations=["Fix audit system errors"],
    )
