"""Base class for validation plugins run by the rule runner."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from praetorian.rules.base import ConfigRule
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    check_counts,
    combine_results,
)


class PluginMetadata(BaseModel):
    name: str
    version: str = "0.1.0"
    description: str = ""
    author: str = ""
    enabled: bool = True


class ValidationPlugin(ABC):
    """A named bundle of rules.

    ``validate`` runs every enabled rule in order and sums their check
    counters. A rule that raises becomes a ``PLUGIN_ERROR`` entry rather than
    aborting the remaining rules.
    """

    def __init__(
        self,
        metadata: PluginMetadata,
        rules: list[ConfigRule] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.metadata = metadata
        self._rules: list[ConfigRule] = list(rules or [])
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def enabled(self) -> bool:
        return self.metadata.enabled

    def add_rule(self, rule: ConfigRule) -> None:
        self._rules.append(rule)

    def get_rules(self) -> list[ConfigRule]:
        return [r for r in self._rules if r.enabled]

    def get_rule(self, rule_id: str) -> ConfigRule | None:
        for rule in self._rules:
            if rule.id == rule_id and rule.enabled:
                return rule
        return None

    def set_rule_enabled(self, rule_id: str, enabled: bool) -> bool:
        for rule in self._rules:
            if rule.id == rule_id:
                rule.enabled = enabled
                return True
        return False

    async def validate(
        self, config: dict[str, Any], context: ValidationContext,
    ) -> ValidationResult:
        results: list[ValidationResult] = []

        for rule in self.get_rules():
            try:
                results.append(await self.execute_rule(rule, config, context))
            except Exception as e:
                self._logger.exception(
                    "Plugin %s failed on rule %s", self.name, rule.id,
                )
                results.append(
                    ValidationResult(
                        success=False,
                        errors=[
                            ValidationError(
                                code="PLUGIN_ERROR",
                                message=(
                                    f"Plugin {self.name} failed to execute rule "
                                    f"{rule.id}: {e}"
                                ),
                                severity=ValidationSeverity.error,
                                context={"ruleId": rule.id, "plugin": self.name},
                            )
                        ],
                        metadata=check_counts(1, 0, 1),
                    )
                )

        combined = combine_results(
            results,
            plugin=self.name,
            version=self.metadata.version,
        )
        self._logger.debug(
            "Plugin %s: %d rules, %d errors, %d warnings",
            self.name,
            len(results),
            len(combined.errors),
            len(combined.warnings),
        )
        return combined

    @abstractmethod
    async def execute_rule(
        self,
        rule: ConfigRule,
        config: dict[str, Any],
        context: ValidationContext,
    ) -> ValidationResult:
        ...
