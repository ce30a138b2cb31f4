"""
Component Base Class

Component: abstract base class for plugin sub-features. Each component is
built with no arguments and attaches its behavior to the host in boot().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from block_pattern_builder.plugin import Plugin


class Component(ABC):
    """
    Abstract base class for plugin components.

    Subclasses implement boot(), which receives the owning plugin so that
    components never reach for a global instance.
    """

    @abstractmethod
    def boot(self, plugin: Plugin) -> None:
        """Register the component's hooks with the plugin's host."""
        ...
