"""Security checks: hardcoded secrets, exposed tokens, plaintext URLs, debug flags."""

from __future__ import annotations

import re
from typing import Any

from praetorian.audit.auditors.base import Auditor, Check, Finding, config_trees, last_segment
from praetorian.rules.key_paths import iter_leaves
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationSeverity,
    ValidationWarning,
    WarningSeverity,
)

SENSITIVE_KEY_PARTS = (
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "private_key",
    "access_key",
    "credential",
)

# Values that clearly defer to something else rather than hold a secret.
PLACEHOLDER_RE = re.compile(r"^(\$\{[^}]+\}|\$[A-Z_][A-Z0-9_]*|<[^>]+>|%\([^)]+\)s|\*+)$")

TOKEN_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("AWS access key", re.compile(r"\bAKIA[0-9A-Z]{16}\b")),
    ("private key", re.compile(r"-----BEGIN [A-Z ]*PRIVATE KEY-----")),
    ("GitHub token", re.compile(r"\bgh[pousr]_[A-Za-z0-9]{36,}\b")),
    ("API secret key", re.compile(r"\bsk-[A-Za-z0-9_-]{20,}\b")),
    ("Slack token", re.compile(r"\bxox[abprs]-[A-Za-z0-9-]{10,}\b")),
]

SECRET_SHAPE_PATTERNS = [
    re.compile(r"^[A-Za-z0-9+/]{32,}={0,2}$"),
    re.compile(r"^[0-9a-fA-F]{32,}$"),
    re.compile(r"^[A-Za-z0-9_-]{24,}\.[A-Za-z0-9_-]{6,}\.[A-Za-z0-9_-]{20,}$"),
]

LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0", "::1", "[::1]"}
PRODUCTION_ENVIRONMENTS = {"production", "prod"}
DEBUG_KEYS = {"debug", "debug_mode", "debugmode"}
TRUTHY = {"true", "1", "yes", "on"}


def is_sensitive_key(path: str) -> bool:
    key = last_segment(path)
    return any(part in key for part in SENSITIVE_KEY_PARTS)


def looks_like_secret(value: str) -> bool:
    """High-entropy looking strings: long base64, hex digests, JWTs."""
    return any(p.match(value) for p in SECRET_SHAPE_PATTERNS)


def mask_secret(value: str) -> str:
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"


def _is_production(context: ValidationContext) -> bool:
    return context.environment.lower() in PRODUCTION_ENVIRONMENTS


def check_hardcoded_secrets(context: ValidationContext) -> list[Finding]:
    """Flag sensitive keys holding literal values instead of references."""
    findings: list[Finding] = []
    for source, tree in config_trees(context):
        for path, value in iter_leaves(tree):
            if not is_sensitive_key(path) or not isinstance(value, str):
                continue
            if not value.strip() or PLACEHOLDER_RE.match(value.strip()):
                continue
            severity = (
                ValidationSeverity.critical
                if looks_like_secret(value)
                else ValidationSeverity.error
            )
            findings.append(
                ValidationError(
                    code="SECURITY_HARDCODED_SECRET",
                    message=f"Hardcoded secret in '{path}' ({source})",
                    path=path,
                    severity=severity,
                    context={"file": source, "value": mask_secret(value)},
                )
            )
    return findings


def check_exposed_tokens(context: ValidationContext) -> list[Finding]:
    """Flag well-known credential formats wherever they appear."""
    findings: list[Finding] = []
    for source, tree in config_trees(context):
        for path, value in iter_leaves(tree):
            if not isinstance(value, str):
                continue
            for label, pattern in TOKEN_PATTERNS:
                if pattern.search(value):
                    findings.append(
                        ValidationError(
                            code="SECURITY_EXPOSED_TOKEN",
                            message=f"Value of '{path}' contains a {label} ({source})",
                            path=path,
                            severity=ValidationSeverity.critical,
                            context={"file": source, "tokenType": label},
                        )
                    )
                    break
    return findings


def _url_host(url: str) -> str:
    rest = url.split("://", 1)[1]
    authority = rest.split("/", 1)[0].rsplit("@", 1)[-1]
    if authority.startswith("["):
        return authority.split("]", 1)[0] + "]"
    return authority.split(":", 1)[0].lower()


def check_insecure_urls(context: ValidationContext) -> list[Finding]:
    """Plain http:// to a non-local host: an error in production, a warning elsewhere."""
    findings: list[Finding] = []
    production = _is_production(context)
    for source, tree in config_trees(context):
        for path, value in iter_leaves(tree):
            if not isinstance(value, str) or not value.lower().startswith("http://"):
                continue
            host = _url_host(value)
            if host in LOCAL_HOSTS:
                continue
            message = f"Insecure URL in '{path}' uses http:// ({source})"
            details = {"file": source, "host": host}
            if production:
                findings.append(
                    ValidationError(
                        code="SECURITY_INSECURE_URL",
                        message=message,
                        path=path,
                        context=details,
                    )
                )
            else:
                findings.append(
                    ValidationWarning(
                        code="SECURITY_INSECURE_URL",
                        message=message,
                        path=path,
                        context=details,
                    )
                )
    return findings


def _truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return isinstance(value, str) and value.strip().lower() in TRUTHY


def check_debug_enabled(context: ValidationContext) -> list[Finding]:
    findings: list[Finding] = []
    production = _is_production(context)
    for source, tree in config_trees(context):
        for path, value in iter_leaves(tree):
            if last_segment(path) not in DEBUG_KEYS or not _truthy(value):
                continue
            if production:
                findings.append(
                    ValidationError(
                        code="SECURITY_DEBUG_ENABLED",
                        message=f"Debug mode is enabled in production via '{path}' ({source})",
                        path=path,
                        context={"file": source},
                    )
                )
            else:
                findings.append(
                    ValidationWarning(
                        code="SECURITY_DEBUG_ENABLED",
                        message=f"Debug mode is enabled via '{path}' ({source})",
                        path=path,
                        severity=WarningSeverity.info,
                        context={"file": source},
                    )
                )
    return findings


class SecurityAuditor(Auditor):
    category = "security"

    def checks(self) -> list[Check]:
        return [
            check_hardcoded_secrets,
            check_exposed_tokens,
            check_insecure_urls,
            check_debug_enabled,
        ]
