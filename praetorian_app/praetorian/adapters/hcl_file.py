"""HCL / Terraform adapter using python-hcl2.

python-hcl2 returns every block type as a list of labelled mappings
(``{"variable": [{"region": {...}}]}``). Top-level blocks are folded into one
mapping per block type so their labels become key paths
(``variable.region.default``).
"""

from __future__ import annotations

from typing import Any

from praetorian.adapters.base import FileAdapter, located
from praetorian.adapters.canonical import to_canonical
from praetorian.exceptions import ConfigParseError, UnsupportedFormatError
from praetorian.validator.models import ConfigFormat

BLOCK_TYPES = frozenset(
    {"resource", "data", "variable", "output", "provider", "module", "terraform", "locals"}
)


def _unquote(value: Any) -> Any:
    """Drop the double quotes some python-hcl2 releases keep on strings and labels.

    Parser metadata keys such as ``__start_line__`` are dropped too.
    """
    if isinstance(value, str) and len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    if isinstance(value, dict):
        return {
            _unquote(k): _unquote(v)
            for k, v in value.items()
            if not (k.startswith("__") and k.endswith("__"))
        }
    if isinstance(value, list):
        return [_unquote(v) for v in value]
    return value


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge(existing, value)
        else:
            target[key] = value


def fold_blocks(tree: dict[str, Any]) -> dict[str, Any]:
    folded: dict[str, Any] = {}
    for key, value in tree.items():
        if key in BLOCK_TYPES and isinstance(value, list):
            merged: dict[str, Any] = {}
            for block in value:
                if isinstance(block, dict):
                    _merge(merged, block)
            folded[key] = merged
        else:
            folded[key] = value
    return folded


def parse_hcl_content(text: str, source: str | None = None) -> dict[str, Any]:
    if not text or not text.strip():
        return {}

    try:
        import hcl2
    except ImportError as e:
        raise UnsupportedFormatError(
            "HCL support needs the python-hcl2 package (install praetorian[hcl])",
            file_path=source,
        ) from e

    try:
        parsed = hcl2.loads(text)
    except Exception as e:
        raise ConfigParseError(
            f"Invalid HCL syntax{located(source)}: {e}", file_path=source
        ) from e

    return fold_blocks(_unquote(to_canonical(parsed)))


class HclFileAdapter(FileAdapter):
    format = ConfigFormat.hcl
    extensions = (".hcl", ".tf", ".tfvars")

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_hcl_content(text, source)
