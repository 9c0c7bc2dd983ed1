"""Key-path extraction for structural comparison."""

from __future__ import annotations

from typing import Any, Iterable


def extract_key_paths(tree: Any, prefix: str = "") -> set[str]:
    """Flatten a mapping into dot-joined key paths.

    Every mapping key yields its path; only mapping values are descended into.
    Lists are leaves: ``{"hosts": [{"a": 1}]}`` yields just ``{"hosts"}``.
    """
    paths: set[str] = set()
    if not isinstance(tree, dict):
        return paths

    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        paths.add(path)
        if isinstance(value, dict):
            paths.update(extract_key_paths(value, path))

    return paths


def restrict_to_paths(tree: dict[str, Any], paths: Iterable[str]) -> dict[str, Any]:
    """Rebuild ``tree`` keeping only the keys whose paths are in ``paths``.

    Mappings that lose all their children are kept empty as long as their
    own path is kept.
    """
    wanted = set(paths)

    def _walk(node: dict[str, Any], prefix: str) -> dict[str, Any]:
        kept: dict[str, Any] = {}
        for key, value in node.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            if path not in wanted:
                continue
            kept[key] = _walk(value, path) if isinstance(value, dict) else value
        return kept

    return _walk(tree, "")


def is_ignored(path: str, ignore_keys: Iterable[str]) -> bool:
    """True if ``path`` is one of ``ignore_keys`` or nested under one."""
    return any(path == key or path.startswith(f"{key}.") for key in ignore_keys)


def get_path(tree: Any, path: str) -> Any:
    """Resolve a dot path in a canonical tree, ``None`` when absent."""
    node = tree
    for part in path.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def iter_leaves(tree: Any, prefix: str = "") -> Iterable[tuple[str, Any]]:
    """Yield ``(path, value)`` for every non-mapping value under ``tree``."""
    if not isinstance(tree, dict):
        return
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            yield from iter_leaves(value, path)
        else:
            yield path, value
