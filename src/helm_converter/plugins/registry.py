"""Notation plugin registry.

The built-in ``helm`` and ``sequence`` notations are registered first. Each
``--plugin-module`` entry is then imported, either by dotted module path or
from a ``.py`` file, and contributes plugins through the first of these
module-level exports it defines:

* ``register_plugins(registry)``, called with the registry;
* ``PLUGINS``, an iterable of plugin objects;
* ``PLUGIN``, a single plugin object.

Plugin modules run arbitrary code on import; load only trusted ones.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType

from helm_converter.errors import PluginError
from helm_converter.plugins.base import NotationPlugin
from helm_converter.plugins.builtins import HelmPlugin, SequencePlugin
from helm_converter.types import PluginModules

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Unique notation names mapped to the plugins that handle them."""

    def __init__(self) -> None:
        self._by_name: dict[str, NotationPlugin] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def register(self, plugin: object) -> NotationPlugin:
        """Add ``plugin`` under its ``name``.

        Raises
        ------
        PluginError
            If the object does not implement ``NotationPlugin``, its name is
            blank, or another plugin already claimed the name.
        """
        if not isinstance(plugin, NotationPlugin):
            raise PluginError(
                f"{type(plugin).__name__} is not a notation plugin: it needs "
                "'name', 'description', create_parser() and create_renderer()."
            )
        name = plugin.name.strip() if isinstance(plugin.name, str) else ""
        if not name:
            raise PluginError("Notation plugin name cannot be empty.")
        if name in self._by_name:
            owner = type(self._by_name[name]).__name__
            raise PluginError(f"Notation '{name}' is already registered by {owner}.")

        self._by_name[name] = plugin
        logger.debug("Registered notation '%s': %s", name, plugin.description)
        return plugin

    def names(self) -> list[str]:
        return sorted(self._by_name)

    def get(self, name: str) -> NotationPlugin:
        """Look up the plugin for notation ``name``.

        Raises
        ------
        PluginError
            If no plugin handles ``name``; the message lists known notations.
        """
        plugin = self._by_name.get(name)
        if plugin is None:
            raise PluginError(
                f"Unknown notation '{name}'. Available notations: {', '.join(self.names())}"
            )
        return plugin

    def load_module(self, module_or_path: str) -> list[str]:
        """Import a plugin module and register its exports.

        Returns
        -------
        list[str]
            Notation names the module added, sorted.
        """
        before = set(self._by_name)
        _register_exports(_import_plugin_module(module_or_path), self)
        added = sorted(set(self._by_name) - before)
        logger.debug("Plugin module %s added notations: %s", module_or_path, added)
        return added


def _import_plugin_module(module_or_path: str) -> ModuleType:
    path = Path(module_or_path)
    try:
        if path.is_file():
            return _exec_file(path)
        return importlib.import_module(module_or_path)
    except PluginError:
        raise
    except Exception as exc:
        raise PluginError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _exec_file(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise PluginError(f"'{path}' is not a loadable Python module.")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _register_exports(module: ModuleType, registry: PluginRegistry) -> None:
    hook = getattr(module, "register_plugins", None)
    if callable(hook):
        hook(registry)
        return

    plugins = getattr(module, "PLUGINS", None)
    if plugins is None and getattr(module, "PLUGIN", None) is not None:
        plugins = [module.PLUGIN]
    if plugins is None:
        raise PluginError(
            f"Plugin module '{module.__name__}' exports none of "
            "register_plugins(registry), PLUGINS or PLUGIN."
        )
    for plugin in plugins:
        registry.register(plugin)


def create_default_registry(
    extra_modules: PluginModules | None = None,
) -> PluginRegistry:
    """Registry holding the built-in notations plus those from ``extra_modules``."""
    registry = PluginRegistry()
    for plugin in (HelmPlugin(), SequencePlugin()):
        registry.register(plugin)
    for module_or_path in extra_modules or ():
        registry.load_module(module_or_path)
    return registry
