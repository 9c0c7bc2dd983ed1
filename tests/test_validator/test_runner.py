"""Tests for the Validator rule runner and plugins."""

from __future__ import annotations

import asyncio
import logging

import pytest

from praetorian.exceptions import InvalidArgumentError
from praetorian.plugins.base import PluginMetadata, ValidationPlugin
from praetorian.plugins.manager import PluginManager
from praetorian.plugins.structure import StructurePlugin
from praetorian.project import ProjectConfig
from praetorian.rules.base import ConfigRule
from praetorian.rules.equality import EqualityRule
from praetorian.validator import Validator
from praetorian.validator.models import (
    ConfigFile,
    ConfigFormat,
    ValidationContext,
    ValidationError,
    ValidationResult,
    check_counts,
)


class StaticRule(ConfigRule):
    """Rule returning a fixed number of errors."""

    def __init__(self, rule_id: str, errors: int = 0, fail: bool = False) -> None:
        super().__init__(rule_id, rule_id)
        self._errors = errors
        self._fail = fail

    async def execute(self, files: list[ConfigFile]) -> ValidationResult:
        if self._fail:
            raise RuntimeError("rule exploded")
        errors = [
            ValidationError(code=f"{self.id.upper()}_{i}", message="bad")
            for i in range(self._errors)
        ]
        return ValidationResult(
            success=not errors,
            errors=errors,
            metadata=check_counts(1, 0 if errors else 1, 1 if errors else 0),
        )


class RulePlugin(ValidationPlugin):
    def __init__(self, name: str, rules: list[ConfigRule], delay: float = 0.0) -> None:
        super().__init__(PluginMetadata(name=name), rules)
        self._delay = delay

    async def execute_rule(self, rule, config, context) -> ValidationResult:
        if self._delay:
            await asyncio.sleep(self._delay)
        return await rule.execute([])


class ExplodingPlugin(ValidationPlugin):
    def __init__(self) -> None:
        super().__init__(PluginMetadata(name="exploding"))

    async def validate(self, config, context) -> ValidationResult:
        raise RuntimeError("boom")

    async def execute_rule(self, rule, config, context) -> ValidationResult:
        raise NotImplementedError


class MutatingPlugin(ValidationPlugin):
    def __init__(self) -> None:
        super().__init__(PluginMetadata(name="mutating"), [StaticRule("noop")])

    async def execute_rule(self, rule, config, context) -> ValidationResult:
        config["injected"] = True
        context.metadata["injected"] = True
        return await rule.execute([])


def _context(**kwargs) -> ValidationContext:
    return ValidationContext(config={"a": 1}, **kwargs)


class TestValidateArguments:
    @pytest.mark.asyncio
    async def test_config_must_be_mapping(self) -> None:
        with pytest.raises(InvalidArgumentError):
            await Validator().validate(None, _context())
        with pytest.raises(InvalidArgumentError):
            await Validator().validate([1, 2], _context())

    @pytest.mark.asyncio
    async def test_context_required(self) -> None:
        with pytest.raises(InvalidArgumentError):
            await Validator().validate({}, None)


class TestAggregation:
    @pytest.mark.asyncio
    async def test_no_plugins(self) -> None:
        result = await Validator().validate({"a": 1}, _context())
        assert result.success is True
        assert [w.code for w in result.warnings] == ["NO_PLUGINS"]
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_disabled_plugins_not_run(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("r", errors=1)])])
        validator.plugins.set_enabled("p", False)
        result = await validator.validate({}, _context())
        assert [w.code for w in result.warnings] == ["NO_PLUGINS"]

    @pytest.mark.asyncio
    async def test_lenient_mode_reports_but_succeeds(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("r", errors=1)])])
        result = await validator.validate({"a": 1}, _context())
        assert result.success is True
        assert len(result.errors) == 1
        assert result.metadata["strict"] is False

    @pytest.mark.asyncio
    async def test_strict_mode_fails(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("r", errors=1)])], strict=True)
        result = await validator.validate({"a": 1}, _context())
        assert result.success is False

    @pytest.mark.asyncio
    async def test_strict_mode_clean_run_succeeds(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("r")])], strict=True)
        result = await validator.validate({"a": 1}, _context())
        assert result.success is True

    @pytest.mark.asyncio
    async def test_counters_summed(self) -> None:
        validator = Validator([
            RulePlugin("p1", [StaticRule("a"), StaticRule("b", errors=2)]),
            RulePlugin("p2", [StaticRule("c", errors=1)]),
        ])
        result = await validator.validate({}, _context())
        assert result.metadata["pluginsChecked"] == 2
        assert result.metadata["rulesChecked"] == 3
        assert result.metadata["rulesPassed"] == 1
        assert result.metadata["rulesFailed"] == 2

    @pytest.mark.asyncio
    async def test_order_follows_registration_not_completion(self) -> None:
        validator = Validator([
            RulePlugin("slow", [StaticRule("slow", errors=1)], delay=0.05),
            RulePlugin("fast", [StaticRule("fast", errors=1)]),
        ])
        result = await validator.validate({}, _context())
        assert [e.code for e in result.errors] == ["SLOW_0", "FAST_0"]

    @pytest.mark.asyncio
    async def test_plugin_exception_becomes_error(self) -> None:
        validator = Validator([
            ExplodingPlugin(),
            RulePlugin("p", [StaticRule("r")]),
        ])
        result = await validator.validate({}, _context())
        assert [e.code for e in result.errors] == ["PLUGIN_ERROR"]
        assert "boom" in result.errors[0].message
        assert result.metadata["rulesPassed"] == 1

    @pytest.mark.asyncio
    async def test_rule_exception_becomes_plugin_error(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("r", fail=True)])])
        result = await validator.validate({}, _context())
        assert [e.code for e in result.errors] == ["PLUGIN_ERROR"]
        assert result.errors[0].context == {"ruleId": "r", "plugin": "p"}
        assert result.metadata["rulesFailed"] == 1

    @pytest.mark.asyncio
    async def test_plugins_get_their_own_copies(self) -> None:
        config = {"a": 1}
        context = _context()
        await Validator([MutatingPlugin()]).validate(config, context)
        assert config == {"a": 1}
        assert "injected" not in context.metadata


class TestRuleToggles:
    def test_get_and_disable_rules(self) -> None:
        validator = Validator([RulePlugin("p", [StaticRule("a"), StaticRule("b")])])
        assert [r.id for r in validator.get_rules()] == ["a", "b"]
        assert validator.set_rule_enabled("a", False) is True
        assert [r.id for r in validator.get_rules()] == ["b"]
        assert validator.set_rule_enabled("missing", False) is False


class TestLogger:
    def test_injected_logger_exposed(self) -> None:
        log = logging.getLogger("praetorian.validator")
        assert Validator([], logger=log).logger is log

    def test_default_logger(self) -> None:
        assert Validator().logger.name == "praetorian.validator.runner"


class TestPluginManager:
    def test_register_replaces_same_name(self) -> None:
        manager = PluginManager()
        first = RulePlugin("p", [])
        second = RulePlugin("p", [])
        manager.register(first)
        manager.register(second)
        assert manager.get("p") is second
        assert [m.name for m in manager.list_plugins()] == ["p"]


class TestStructurePlugin:
    @pytest.mark.asyncio
    async def test_compares_attached_files(self) -> None:
        files = [
            ConfigFile(path="dev.env", format=ConfigFormat.env, content={"A": "1", "B": "2"}),
            ConfigFile(path="prod.env", format=ConfigFormat.env, content={"A": "1"}),
        ]
        context = ValidationContext(config=files[0].content, metadata={"files": files})
        result = await Validator([StructurePlugin()]).validate(context.config, context)
        assert [e.code for e in result.errors] == ["MISSING_KEY"]
        assert result.errors[0].context["file"] == "prod.env"
        assert result.success is True

    @pytest.mark.asyncio
    async def test_single_config_without_files(self) -> None:
        result = await Validator([StructurePlugin()]).validate({"a": 1}, _context())
        assert [w.code for w in result.warnings] == ["INSUFFICIENT_FILES"]

    @pytest.mark.asyncio
    async def test_from_project(self) -> None:
        project = ProjectConfig(
            files=["a.yaml"],
            required_keys=["name"],
            patterns=[{"type": "port", "target_path": "port"}],
        )
        plugin = StructurePlugin.from_project(project)
        assert [r.id for r in plugin.get_rules()] == ["equality", "required-keys", "patterns"]
        assert isinstance(plugin.get_rules()[0], EqualityRule)

        result = await Validator([plugin]).validate(
            {"port": "99999"}, ValidationContext(config={"port": "99999"}),
        )
        codes = [e.code for e in result.errors]
        assert codes == ["MISSING_REQUIRED_KEY", "PATTERN_MISMATCH_PORT_RANGE"]
