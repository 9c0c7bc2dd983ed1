"""Audit engine and scoring."""

from praetorian.audit.engine import AuditEngine
from praetorian.audit.models import AuditResult, AuditSummary, Grade
from praetorian.audit.scoring import calculate_summary, compute_score, grade_for

__all__ = [
    "AuditEngine",
    "AuditResult",
    "AuditSummary",
    "Grade",
    "calculate_summary",
    "compute_score",
    "grade_for",
]
