"""Structural validation plugin: key equality, required keys and value patterns."""

from __future__ import annotations

import logging
from typing import Any

from praetorian.plugins.base import PluginMetadata, ValidationPlugin
from praetorian.project import ProjectConfig
from praetorian.rules.base import ConfigRule
from praetorian.rules.equality import EqualityRule
from praetorian.rules.pattern import PatternMatchingRule
from praetorian.rules.required_keys import RequiredKeysRule
from praetorian.validator.models import (
    ConfigFile,
    ConfigFormat,
    ValidationContext,
    ValidationResult,
)

INLINE_CONFIG_PATH = "<config>"


class StructurePlugin(ValidationPlugin):
    """Runs file rules over the files attached to the validation context.

    With no files attached, the configuration itself is checked as a single
    in-memory file.
    """

    def __init__(
        self,
        rules: list[ConfigRule] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            PluginMetadata(
                name="structure",
                description="Key equality, required keys and value patterns",
            ),
            rules if rules is not None else [EqualityRule()],
            logger=logger,
        )

    @classmethod
    def from_project(
        cls, project: ProjectConfig, logger: logging.Logger | None = None,
    ) -> StructurePlugin:
        rules: list[ConfigRule] = [EqualityRule(ignore_keys=project.ignore_keys)]
        if project.required_keys:
            rules.append(RequiredKeysRule(project.required_keys))
        if project.patterns:
            rules.append(
                PatternMatchingRule("patterns", "Value patterns", project.patterns)
            )
        return cls(rules, logger=logger)

    async def execute_rule(
        self,
        rule: ConfigRule,
        config: dict[str, Any],
        context: ValidationContext,
    ) -> ValidationResult:
        files = context.files or [
            ConfigFile(
                path=context.project or INLINE_CONFIG_PATH,
                format=ConfigFormat.json,
                content=config,
            )
        ]
        return await rule.execute(files)
