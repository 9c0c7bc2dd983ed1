"""Audit result models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from praetorian.validator.models import ValidationResult


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class AuditSummary(BaseModel):
    """Scores and counts computed once from one audit run's results.

    Serialized with camelCase keys (``criticalIssues``), like result metadata.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    grade: Grade
    critical_issues: int = 0
    security_issues: int = 0
    compliance_issues: int = 0
    recommendations: list[str] = Field(default_factory=list)
    total_checks: int = 0
    passed_checks: int = 0
    failed_checks: int = 0
    warnings: int = 0


class AuditResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    timestamp: datetime
    duration: int = 0
    results: list[ValidationResult] = Field(default_factory=list)
    summary: AuditSummary
