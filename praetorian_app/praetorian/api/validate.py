"""Validation API endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from praetorian.adapters.registry import AdapterRegistry
from praetorian.api.inputs import read_inputs
from praetorian.deps import get_registry, get_validator
from praetorian.plugins.structure import StructurePlugin
from praetorian.validator.models import ValidationResult
from praetorian.validator.runner import Validator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validate"])


class ValidateRequest(BaseModel):
    files: list[str] = Field(default_factory=list, description="Config file paths to compare")
    strict: bool | None = Field(None, description="Override the service strict mode")
    environment: str | None = Field(None, description="Environment name for the context")
    project: str | None = Field(None, description="Path to a praetorian.yaml project file")


@router.post("/validate", response_model=ValidationResult)
async def validate_files(
    body: ValidateRequest,
    registry: AdapterRegistry = Depends(get_registry),
    validator: Validator = Depends(get_validator),
) -> ValidationResult:
    """Read the files and check them against each other."""
    context, read_errors, project = await read_inputs(
        registry, body.files, body.project, body.environment,
    )

    strict = validator.strict if body.strict is None else body.strict
    if project is not None:
        validator = Validator(
            [StructurePlugin.from_project(project, logger=validator.logger)],
            strict=strict,
            logger=validator.logger,
        )
    elif strict != validator.strict:
        validator = Validator(
            validator.plugins.all_plugins(), strict=strict, logger=validator.logger,
        )

    result = await validator.validate(context.config, context)
    if not read_errors:
        return result

    errors = [*read_errors, *result.errors]
    logger.info("Validation finished with %d unreadable files", len(read_errors))
    return ValidationResult(
        success=result.success and not strict,
        errors=errors,
        warnings=result.warnings,
        metadata={**result.metadata, "filesUnreadable": len(read_errors)},
    )
