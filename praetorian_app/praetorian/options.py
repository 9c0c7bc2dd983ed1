"""Service options for the HTTP app."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from praetorian.audit.auditors import AUDIT_CATEGORIES

DEFAULT_OPTIONS_PATH = "/data/options.json"


class PraetorianOptions(BaseModel):
    strict: bool = False
    audit_categories: list[str] = Field(default_factory=lambda: list(AUDIT_CATEGORIES))
    log_level: str = "INFO"

    @field_validator("audit_categories", mode="before")
    @classmethod
    def _split_categories(cls, value):
        if isinstance(value, str):
            return [c.strip() for c in value.split(",") if c.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def load_options() -> PraetorianOptions:
    """Load options from the JSON options file, falling back to env vars."""
    opts_path = os.environ.get("PRAETORIAN_OPTIONS_PATH", DEFAULT_OPTIONS_PATH)
    if Path(opts_path).exists():
        return PraetorianOptions.model_validate(json.loads(Path(opts_path).read_text()))

    values: dict[str, object] = {
        "strict": os.environ.get("PRAETORIAN_STRICT", "false").lower() in ("1", "true", "yes"),
        "log_level": os.environ.get("PRAETORIAN_LOG_LEVEL", "INFO"),
    }
    if os.environ.get("PRAETORIAN_AUDIT_CATEGORIES"):
        values["audit_categories"] = os.environ["PRAETORIAN_AUDIT_CATEGORIES"]
    return PraetorianOptions.model_validate(values)
