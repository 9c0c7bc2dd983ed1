"""Rule runner: fans a configuration out to every enabled plugin and merges the results."""

from __future__ import annotations

import asyncio
import copy
import logging
import time
from typing import Any

from praetorian.exceptions import InvalidArgumentError
from praetorian.plugins.base import ValidationPlugin
from praetorian.plugins.manager import PluginManager
from praetorian.rules.base import ConfigRule
from praetorian.validator.models import (
    ValidationContext,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    WarningSeverity,
)


class Validator:
    """Runs plugins concurrently and aggregates their results in registration order.

    In lenient mode (the default) errors are reported but do not fail the run;
    ``strict=True`` makes any aggregated error set ``success`` to False.
    """

    def __init__(
        self,
        plugins: list[ValidationPlugin] | None = None,
        strict: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.strict = strict
        self._logger = logger or logging.getLogger(__name__)
        self._manager = PluginManager()
        for plugin in plugins or []:
            self._manager.register(plugin)

    @property
    def plugins(self) -> PluginManager:
        return self._manager

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def register_plugin(self, plugin: ValidationPlugin) -> None:
        self._manager.register(plugin)

    def get_rules(self) -> list[ConfigRule]:
        return [r for p in self._manager.enabled_plugins() for r in p.get_rules()]

    def set_rule_enabled(self, rule_id: str, enabled: bool) -> bool:
        for plugin in self._manager.enabled_plugins():
            if plugin.set_rule_enabled(rule_id, enabled):
                return True
        return False

    async def validate(
        self, config: dict[str, Any], context: ValidationContext,
    ) -> ValidationResult:
        """Validate ``config`` with every enabled plugin.

        Raises:
            InvalidArgumentError: config is not a mapping or context is missing.
        """
        if config is None or not isinstance(config, dict):
            raise InvalidArgumentError("Configuration must be a mapping")
        if context is None or not isinstance(context, ValidationContext):
            raise InvalidArgumentError("Validation context is required")

        started = time.monotonic()
        plugins = self._manager.enabled_plugins()

        if not plugins:
            return ValidationResult(
                success=True,
                warnings=[
                    ValidationWarning(
                        code="NO_PLUGINS",
                        message="No validation plugins loaded",
                        severity=WarningSeverity.warning,
                    )
                ],
                metadata={
                    "duration": _elapsed_ms(started),
                    "pluginsChecked": 0,
                    "rulesChecked": 0,
                },
            )

        # Each plugin gets its own copy; gather keeps input order.
        outcomes = await asyncio.gather(
            *(
                plugin.validate(copy.deepcopy(config), context.model_copy(deep=True))
                for plugin in plugins
            ),
            return_exceptions=True,
        )

        results: list[ValidationResult] = []
        for plugin, outcome in zip(plugins, outcomes):
            if isinstance(outcome, ValidationResult):
                results.append(outcome)
            elif isinstance(outcome, Exception):
                self._logger.error("Plugin %s raised: %s", plugin.name, outcome)
                results.append(_plugin_failure(plugin, outcome))
            else:
                raise outcome

        return self._aggregate(results, len(plugins), started)

    def _aggregate(
        self, results: list[ValidationResult], plugin_count: int, started: float,
    ) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        checked = passed = failed = 0

        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
            checked += result.rules_checked
            passed += result.rules_passed
            failed += result.rules_failed

        success = not errors or not self.strict
        self._logger.info(
            "Validation finished: %d plugin(s), %d error(s), %d warning(s), success=%s",
            plugin_count,
            len(errors),
            len(warnings),
            success,
        )

        return ValidationResult(
            success=success,
            errors=errors,
            warnings=warnings,
            metadata={
                "duration": _elapsed_ms(started),
                "pluginsChecked": plugin_count,
                "rulesChecked": checked,
                "rulesPassed": passed,
                "rulesFailed": failed,
                "strict": self.strict,
            },
        )


def _plugin_failure(plugin: ValidationPlugin, exc: Exception) -> ValidationResult:
    return ValidationResult(
        success=False,
        errors=[
            ValidationError(
                code="PLUGIN_ERROR",
                message=f"Plugin {plugin.name} failed: {exc}",
                severity=ValidationSeverity.error,
                context={"plugin": plugin.name},
            )
        ],
        metadata={"plugin": plugin.name, "error": str(exc)},
    )


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
