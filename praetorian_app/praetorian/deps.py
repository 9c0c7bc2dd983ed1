"""Shared FastAPI dependencies."""

from __future__ import annotations

from praetorian.adapters.registry import AdapterRegistry
from praetorian.audit.engine import AuditEngine
from praetorian.options import PraetorianOptions
from praetorian.validator.runner import Validator

_options: PraetorianOptions | None = None
_registry: AdapterRegistry | None = None
_validator: Validator | None = None
_audit_engine: AuditEngine | None = None


def get_options() -> PraetorianOptions:
    """FastAPI dependency: return the loaded service options."""
    assert _options is not None, "Options not loaded"
    return _options


def get_registry() -> AdapterRegistry:
    """FastAPI dependency: return the shared AdapterRegistry."""
    assert _registry is not None, "AdapterRegistry not initialised"
    return _registry


def get_validator() -> Validator:
    """FastAPI dependency: return the shared Validator."""
    assert _validator is not None, "Validator not initialised"
    return _validator


def get_audit_engine() -> AuditEngine:
    """FastAPI dependency: return the shared AuditEngine."""
    assert _audit_engine is not None, "AuditEngine not initialised"
    return _audit_engine
