"""
Block Pattern Builder plugin.

Public API:
    Plugin            — plugin container (components, assets, paths)
    AssetResolver     — manifest-backed asset URL resolution
    ComponentRegistry — identifier → component registry
    HookHost          — in-process host platform
"""

from .assets import AssetResolver, load_manifest
from .components import Component, ComponentRegistry, Editor
from .exceptions import ComponentNotFoundError, ManifestError, PluginError, UnknownComponentError
from .host import Host, HookHost
from .plugin import Plugin

__version__ = "1.1.0"

__all__ = [
    "AssetResolver",
    "Component",
    "ComponentNotFoundError",
    "ComponentRegistry",
    "Editor",
    "HookHost",
    "Host",
    "ManifestError",
    "Plugin",
    "PluginError",
    "UnknownComponentError",
    "load_manifest",
]
