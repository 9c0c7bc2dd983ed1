"""Rule interface shared by the file-level validation rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from praetorian.validator.models import ConfigFile, ValidationResult


class RuleCategory(str, Enum):
    security = "security"
    compliance = "compliance"
    performance = "performance"
    best_practice = "best-practice"


class RuleSeverity(str, Enum):
    error = "error"
    warning = "warning"
    info = "info"


class ConfigRule(ABC):
    """A unit of validation logic over one or more parsed config files."""

    def __init__(
        self,
        rule_id: str,
        name: str,
        description: str = "",
        category: RuleCategory = RuleCategory.best_practice,
        severity: RuleSeverity = RuleSeverity.error,
        enabled: bool = True,
    ) -> None:
        self.id = rule_id
        self.name = name
        self.description = description
        self.category = category
        self.severity = severity
        self.enabled = enabled

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, enabled={self.enabled})"

    @abstractmethod
    async def execute(self, files: list[ConfigFile]) -> ValidationResult:
        ...
