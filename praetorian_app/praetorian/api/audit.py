"""Audit API endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from praetorian.adapters.registry import AdapterRegistry
from praetorian.api.inputs import read_inputs
from praetorian.audit.auditors import build_auditors
from praetorian.audit.engine import AuditEngine
from praetorian.audit.models import AuditResult
from praetorian.deps import get_audit_engine, get_registry
from praetorian.validator.models import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["audit"])


class AuditRequest(BaseModel):
    files: list[str] = Field(default_factory=list)
    environment: str | None = None
    project: str | None = Field(None, description="Path to a praetorian.yaml project file")
    categories: list[str] | None = Field(
        None, description="Audit categories to run instead of the configured ones"
    )


class AuditResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: AuditResult
    file_errors: list[ValidationError] = Field(default_factory=list)


@router.post("/audit", response_model=AuditResponse)
async def audit_files(
    body: AuditRequest,
    registry: AdapterRegistry = Depends(get_registry),
    engine: AuditEngine = Depends(get_audit_engine),
) -> AuditResponse:
    """Run the audit categories over the files and score the outcome."""
    context, read_errors, project = await read_inputs(
        registry, body.files, body.project, body.environment,
    )
    if project is not None:
        engine = AuditEngine(
            engine.categories,
            auditors=build_auditors(
                project.required_keys, project.ignore_keys, logger=engine.logger,
            ),
            logger=engine.logger,
        )

    result = await engine.audit(context, body.categories)
    if read_errors:
        logger.info("Audit ran with %d unreadable files", len(read_errors))
    return AuditResponse(result=result, file_errors=read_errors)
