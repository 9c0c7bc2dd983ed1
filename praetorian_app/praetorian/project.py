"""Project file (``praetorian.yaml``): which files to compare and how."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pydantic
from pydantic import BaseModel, Field, field_validator, model_validator

from praetorian.adapters.registry import AdapterRegistry
from praetorian.exceptions import InvalidArgumentError
from praetorian.rules.pattern import PatternRule

DEFAULT_PROJECT_FILE = "praetorian.yaml"


class ProjectConfig(BaseModel):
    name: str = ""
    files: list[str] = Field(default_factory=list)
    environments: dict[str, str] = Field(default_factory=dict)
    ignore_keys: list[str] = Field(default_factory=list)
    required_keys: list[str] = Field(default_factory=list)
    patterns: list[PatternRule] = Field(default_factory=list)
    base_dir: Path | None = Field(default=None, exclude=True)

    @field_validator("patterns", mode="before")
    @classmethod
    def _expand_pattern_types(cls, value: Any) -> Any:
        """Allow ``{type: email, target_path: admin.email}`` shorthand."""
        if not isinstance(value, list):
            return value
        expanded = []
        for item in value:
            if isinstance(item, dict) and "type" in item and "pattern" not in item:
                options = {k: v for k, v in item.items() if k != "type"}
                target = options.pop("target_path", None)
                if not target:
                    raise ValueError("pattern shorthand requires target_path")
                item = PatternRule.for_type(item["type"], target, **options)
            expanded.append(item)
        return expanded

    @model_validator(mode="after")
    def _require_files(self) -> ProjectConfig:
        if not self.files and not self.environments:
            raise ValueError(
                'Configuration must specify either "files" or "environments"'
            )
        return self

    def display_name(self) -> str:
        """The declared name, else the directory holding the project file."""
        if self.name:
            return self.name
        return self.base_dir.name if self.base_dir is not None else ""

    def file_paths(self, environment: str | None = None) -> list[str]:
        """Resolve the files to validate, relative to the project file."""
        if environment and environment in self.environments:
            paths = [self.environments[environment]]
        elif self.files:
            paths = list(self.files)
        else:
            paths = list(self.environments.values())
        return [self._resolve(p) for p in paths]

    def _resolve(self, path: str) -> str:
        if self.base_dir is None or os.path.isabs(path):
            return path
        return str(self.base_dir / path)


def load_project_config(
    path: str | os.PathLike[str] = DEFAULT_PROJECT_FILE,
    registry: AdapterRegistry | None = None,
) -> ProjectConfig:
    """Load and validate a project file.

    Raises:
        InvalidArgumentError: the content does not describe a valid project.
        ConfigFileNotFoundError, ConfigParseError: from the file adapter.
    """
    registry = registry or AdapterRegistry()
    content = registry.read_file(path).content
    try:
        project = ProjectConfig.model_validate(content)
    except pydantic.ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid project configuration {path}: {e}",
            details={"errors": e.errors(include_url=False)},
        ) from e
    project.base_dir = Path(path).resolve().parent
    return project
