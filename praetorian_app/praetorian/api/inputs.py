"""Request plumbing shared by the validate and audit endpoints."""

from __future__ import annotations

import logging

from fastapi import HTTPException

from praetorian.adapters.registry import AdapterRegistry
from praetorian.exceptions import PraetorianError
from praetorian.project import ProjectConfig, load_project_config
from praetorian.validator.models import ConfigFile, ValidationContext, ValidationError

logger = logging.getLogger(__name__)


def load_project(path: str | None, registry: AdapterRegistry) -> ProjectConfig | None:
    if not path:
        return None
    try:
        return load_project_config(path, registry)
    except PraetorianError as e:
        logger.warning("Rejected project file %s: %s", path, e)
        raise HTTPException(status_code=400, detail=str(e)) from e


def resolve_paths(
    files: list[str],
    project: ProjectConfig | None,
    environment: str | None,
) -> list[str]:
    paths = list(files)
    if not paths and project is not None:
        paths = project.file_paths(environment)
    if not paths:
        raise HTTPException(status_code=400, detail="No configuration files given")
    return paths


def build_context(
    files: list[ConfigFile],
    environment: str | None,
    project_name: str | None,
    project: ProjectConfig | None = None,
) -> ValidationContext:
    """The first readable file is the primary config; all of them ride in metadata."""
    metadata: dict = {"files": files}
    if project is not None and project.required_keys:
        metadata["requiredKeys"] = list(project.required_keys)
    return ValidationContext(
        config=files[0].content if files else {},
        environment=environment or "development",
        project=project_name or "",
        metadata=metadata,
    )


async def read_inputs(
    registry: AdapterRegistry,
    files: list[str],
    project_path: str | None,
    environment: str | None,
) -> tuple[ValidationContext, list[ValidationError], ProjectConfig | None]:
    project = load_project(project_path, registry)
    paths = resolve_paths(files, project, environment)
    loaded, read_errors = await registry.load_files(paths)
    project_name = project.display_name() if project is not None else None
    context = build_context(loaded, environment, project_name, project)
    return context, read_errors, project
