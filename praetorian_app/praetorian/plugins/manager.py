"""Registry of validation plugins, keyed by name."""

from __future__ import annotations

from praetorian.plugins.base import PluginMetadata, ValidationPlugin


class PluginManager:
    def __init__(self) -> None:
        self._plugins: dict[str, ValidationPlugin] = {}

    def register(self, plugin: ValidationPlugin) -> None:
        """Add a plugin; a later plugin with the same name replaces the earlier."""
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> ValidationPlugin | None:
        return self._plugins.get(name)

    def enabled_plugins(self) -> list[ValidationPlugin]:
        return [p for p in self._plugins.values() if p.enabled]

    def all_plugins(self) -> list[ValidationPlugin]:
        return list(self._plugins.values())

    def set_enabled(self, name: str, enabled: bool) -> bool:
        plugin = self._plugins.get(name)
        if plugin is None:
            return False
        plugin.metadata.enabled = enabled
        return True

    def list_plugins(self) -> list[PluginMetadata]:
        return [p.metadata for p in self._plugins.values()]
