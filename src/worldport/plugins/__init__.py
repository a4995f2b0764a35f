"""Plugin interfaces and registry for legacy save formats."""

from .base import FormatPlugin
from .registry import PluginRegistry, create_default_registry

__all__ = ["FormatPlugin", "PluginRegistry", "create_default_registry"]
