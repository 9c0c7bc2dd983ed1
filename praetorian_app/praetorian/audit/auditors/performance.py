"""Performance checks on pool sizes, timeouts and cache lifetimes."""

from __future__ import annotations

from typing import Any

from praetorian.audit.auditors.base import Auditor, Check, Finding, config_trees, last_segment
from praetorian.rules.key_paths import iter_leaves
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationWarning,
)

POOL_KEY_PARTS = ("pool_size", "poolsize", "max_connections", "maxconnections", "pool_max")
MAX_POOL_SIZE = 100
MAX_TIMEOUT_SECONDS = 3600


def as_number(value: Any) -> float | None:
    """Numeric leaves, including numbers that arrived as strings from env files."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _numeric_leaves(context: ValidationContext, *parts: str):
    for source, tree in config_trees(context):
        for path, value in iter_leaves(tree):
            key = last_segment(path)
            if not any(part in key for part in parts):
                continue
            number = as_number(value)
            if number is not None:
                yield source, path, key, number


def check_pool_sizes(context: ValidationContext) -> list[Finding]:
    findings: list[Finding] = []
    for source, path, _, size in _numeric_leaves(context, *POOL_KEY_PARTS):
        if size < 1:
            findings.append(
                ValidationError(
                    code="PERFORMANCE_POOL_SIZE",
                    message=f"Pool size '{path}' must be at least 1, got {size:g} ({source})",
                    path=path,
                    context={"file": source, "value": size},
                )
            )
        elif size > MAX_POOL_SIZE:
            findings.append(
                ValidationWarning(
                    code="PERFORMANCE_POOL_SIZE",
                    message=(
                        f"Pool size '{path}' of {size:g} exceeds {MAX_POOL_SIZE} ({source})"
                    ),
                    path=path,
                    context={"file": source, "value": size},
                )
            )
    return findings


def check_timeouts(context: ValidationContext) -> list[Finding]:
    """Negative timeouts are errors; zero (no timeout) and very long ones are warnings."""
    findings: list[Finding] = []
    for source, path, key, timeout in _numeric_leaves(context, "timeout"):
        limit = MAX_TIMEOUT_SECONDS * 1000 if key.endswith("ms") else MAX_TIMEOUT_SECONDS
        details = {"file": source, "value": timeout}
        if timeout < 0:
            findings.append(
                ValidationError(
                    code="PERFORMANCE_INVALID_TIMEOUT",
                    message=f"Timeout '{path}' is negative ({source})",
                    path=path,
                    context=details,
                )
            )
        elif timeout == 0:
            findings.append(
                ValidationWarning(
                    code="PERFORMANCE_TIMEOUT_DISABLED",
                    message=f"Timeout '{path}' is 0, requests may hang ({source})",
                    path=path,
                    context=details,
                )
            )
        elif timeout > limit:
            findings.append(
                ValidationWarning(
                    code="PERFORMANCE_TIMEOUT_EXCESSIVE",
                    message=f"Timeout '{path}' of {timeout:g} is unusually long ({source})",
                    path=path,
                    context=details,
                )
            )
    return findings


def check_cache_ttl(context: ValidationContext) -> list[Finding]:
    findings: list[Finding] = []
    for source, path, _, ttl in _numeric_leaves(context, "ttl"):
        details = {"file": source, "value": ttl}
        if ttl < 0:
            findings.append(
                ValidationError(
                    code="PERFORMANCE_INVALID_CACHE_TTL",
                    message=f"Cache TTL '{path}' is negative ({source})",
                    path=path,
                    context=details,
                )
            )
        elif ttl == 0:
            findings.append(
                ValidationWarning(
                    code="PERFORMANCE_CACHE_DISABLED",
                    message=f"Cache TTL '{path}' is 0, caching is effectively off ({source})",
                    path=path,
                    context=details,
                )
            )
    return findings


class PerformanceAuditor(Auditor):
    category = "performance"

    def checks(self) -> list[Check]:
        return [check_pool_sizes, check_timeouts, check_cache_ttl]
