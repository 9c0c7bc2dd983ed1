"""Audit categories."""

from __future__ import annotations

import logging
from typing import Iterable

from praetorian.audit.auditors.base import Auditor
from praetorian.audit.auditors.compliance import ComplianceAuditor
from praetorian.audit.auditors.performance import PerformanceAuditor
from praetorian.audit.auditors.security import SecurityAuditor

AUDITORS: dict[str, type[Auditor]] = {
    SecurityAuditor.category: SecurityAuditor,
    ComplianceAuditor.category: ComplianceAuditor,
    PerformanceAuditor.category: PerformanceAuditor,
}

AUDIT_CATEGORIES = tuple(AUDITORS)


def build_auditors(
    required_keys: Iterable[str] = (),
    ignore_keys: Iterable[str] = (),
    logger: logging.Logger | None = None,
) -> dict[str, Auditor]:
    """One auditor per registered category, keyed by category name."""
    auditors: dict[str, Auditor] = {}
    for name, auditor_cls in AUDITORS.items():
        if auditor_cls is ComplianceAuditor:
            auditors[name] = ComplianceAuditor(required_keys, ignore_keys, logger=logger)
        else:
            auditors[name] = auditor_cls(logger=logger)
    return auditors


__all__ = [
    "AUDITORS",
    "AUDIT_CATEGORIES",
    "Auditor",
    "ComplianceAuditor",
    "PerformanceAuditor",
    "SecurityAuditor",
    "build_auditors",
]
