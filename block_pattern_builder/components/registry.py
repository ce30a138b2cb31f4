"""
Component Registry

ComponentRegistry: builds plugin components from a closed factory mapping,
stores one instance per identifier and boots them in registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from block_pattern_builder.components.base import Component
from block_pattern_builder.components.editor import Editor
from block_pattern_builder.exceptions import ComponentNotFoundError, UnknownComponentError

if TYPE_CHECKING:
    from block_pattern_builder.plugin import Plugin

logger = logging.getLogger(__name__)

ComponentFactory = Callable[[], Component]

# ── Known components ──────────────────────────────────────────────────────────
COMPONENT_FACTORIES: dict[str, ComponentFactory] = {
    "Editor": Editor,
}


class ComponentRegistry:
    """
    Registry of plugin components keyed by identifier.

    Args:
        factories: Identifier → no-argument constructor. Defaults to
                   COMPONENT_FACTORIES.
    """

    def __init__(self, factories: Mapping[str, ComponentFactory] | None = None) -> None:
        self._factories: dict[str, ComponentFactory] = dict(COMPONENT_FACTORIES if factories is None else factories)
        self._components: dict[str, Component] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, identifier: str) -> Component:
        """Build a new instance of `identifier`, replacing any previous one."""
        factory = self._factories.get(identifier)
        if factory is None:
            raise UnknownComponentError(identifier, available=sorted(self._factories))
        component = factory()
        self._components[identifier] = component
        logger.info("Component registered: %s", identifier, extra={"component": identifier})
        return component

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, identifier: str) -> Component:
        """Return the registered component; raise ComponentNotFoundError otherwise."""
        try:
            return self._components[identifier]
        except KeyError:
            raise ComponentNotFoundError(identifier) from None

    def is_registered(self, identifier: str) -> bool:
        return identifier in self._components

    def identifiers(self) -> list[str]:
        """Return registered identifiers in registration order."""
        return list(self._components)

    def all_components(self) -> list[Component]:
        """Return all registered components in registration order."""
        return list(self._components.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._components

    def __len__(self) -> int:
        return len(self._components)

    # ── Boot ──────────────────────────────────────────────────────────────────

    def boot_all(self, plugin: Plugin) -> None:
        """Call boot() on every component in registration order."""
        for identifier, component in self._components.items():
            component.boot(plugin)
            logger.debug("Component booted: %s", identifier, extra={"component": identifier})
        logger.info("Booted %d components", len(self._components))
