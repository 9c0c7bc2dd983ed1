"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path
from typing import Callable

# Add praetorian_app/ to Python path so `from praetorian.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "praetorian_app"))

import pytest

os.environ["PRAETORIAN_DEV_MODE"] = "true"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], str]:
    """Write a file under tmp_path and return its path as a string."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
