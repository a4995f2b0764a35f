"""Plugin registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from worldport.errors import PluginError
from worldport.plugins.base import FormatPlugin
from worldport.plugins.builtins import ClassicLevelPlugin


FALLBACK_PLUGIN = ClassicLevelPlugin.name


class PluginRegistry:
    """Registry for format plugins."""

    def __init__(self) -> None:
        self._plugins: dict[str, FormatPlugin] = {}

    def register(self, plugin: FormatPlugin) -> None:
        """Register plugin instance by unique name.

        Parameters
        ----------
        plugin : FormatPlugin
            Plugin instance to register.

        Raises
        ------
        PluginError
            If plugin does not provide a valid name.
        """
        name = getattr(plugin, "name", "").strip()
        if not name:
            raise PluginError("Plugin must define a non-empty 'name'.")
        self._plugins[name] = plugin

    def names(self) -> list[str]:
        """Return registered plugin names, sorted."""
        return sorted(self._plugins.keys())

    def get(self, name: str) -> FormatPlugin:
        """Get plugin by name.

        Raises
        ------
        PluginError
            If plugin name is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown plugin '{name}'. Available plugins: {', '.join(self.names())}"
            ) from exc

    def resolve(self, level_path: Path, plugin_name: str | None = None) -> FormatPlugin:
        """Resolve plugin either explicitly or by ``can_handle`` lookup.

        Files no plugin claims go to the built-in classic plugin, whose
        loader decides whether the content is a level.

        Parameters
        ----------
        level_path : Path
            Path to the legacy save.
        plugin_name : str | None
            Explicit plugin name.

        Returns
        -------
        FormatPlugin
            Resolved plugin.

        Raises
        ------
        PluginError
            If multiple plugins claim the file, or none does and the
            fallback plugin is not registered.
        """
        if plugin_name:
            return self.get(plugin_name)

        matches = [
            plugin for plugin in self._plugins.values() if plugin.can_handle(level_path)
        ]
        if not matches and FALLBACK_PLUGIN in self._plugins:
            return self._plugins[FALLBACK_PLUGIN]
        if not matches:
            raise PluginError(
                f"No plugin could handle {level_path}. "
                f"Available plugins: {', '.join(self.names())}"
            )
        if len(matches) > 1:
            names = ", ".join(plugin.name for plugin in matches)
            raise PluginError(
                f"Multiple plugins can handle {level_path} ({names}). "
                "Set plugin-name in [plugin-settings]."
            )
        return matches[0]

    def load_module(self, module_or_path: str) -> None:
        """Load plugin providers from module name or file path.

        .. warning::
            This executes code from the specified module. Only list trusted
            modules in the configuration.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.suffix == ".py" and candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(f"Unable to load plugin module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise PluginError(
                f"Unable to load plugin module from {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: PluginRegistry) -> None:
    """Register plugin definitions exposed by ``module``."""
    if hasattr(module, "register_plugins"):
        module.register_plugins(registry)
        return

    plugins_obj = getattr(module, "PLUGINS", None)
    if plugins_obj is not None:
        for plugin in plugins_obj:
            registry.register(plugin)
        return

    plugin_obj = getattr(module, "PLUGIN", None)
    if plugin_obj is not None:
        registry.register(plugin_obj)
        return

    raise PluginError(
        "Plugin module must expose register_plugins(registry), PLUGINS, or PLUGIN."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> PluginRegistry:
    """Create registry with the built-in plugin plus ``extra_modules``."""
    registry = PluginRegistry()
    registry.register(ClassicLevelPlugin())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
