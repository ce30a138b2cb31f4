"""
Plugin components.

    Component          — abstract base class for all components
    ComponentRegistry  — identifier → instance registry
    Editor             — block editor asset loader
"""

from .base import Component
from .editor import Editor
from .registry import COMPONENT_FACTORIES, ComponentRegistry

__all__ = ["COMPONENT_FACTORIES", "Component", "ComponentRegistry", "Editor"]
