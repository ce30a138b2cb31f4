"""
Plugin

Primary plugin class. Launches the plugin components and acts as a simple
container: it owns the component registry, the asset resolver and the host
handle, and answers path/URI questions about the plugin's install.
"""

from __future__ import annotations

import logging
from pathlib import Path

from block_pattern_builder.assets import AssetResolver
from block_pattern_builder.components.base import Component
from block_pattern_builder.components.registry import ComponentRegistry
from block_pattern_builder.config import Settings
from block_pattern_builder.config import settings as default_settings
from block_pattern_builder.hooks import HOOK_PLUGINS_LOADED
from block_pattern_builder.host import Host, HookHost
from block_pattern_builder.utils.paths import join, untrailingslashit

logger = logging.getLogger(__name__)


class Plugin:
    """
    Plugin container.

    Args:
        path:     Plugin directory path.
        uri:      Plugin directory URI.
        host:     Host platform; an in-process HookHost rooted at the
                  plugins directory when omitted.
        settings: Plugin settings; the module-level settings when omitted.
        registry: Component registry; a registry over COMPONENT_FACTORIES
                  when omitted.
    """

    def __init__(
        self,
        path: str,
        uri: str,
        host: Host | None = None,
        settings: Settings | None = None,
        registry: ComponentRegistry | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self._path = untrailingslashit(path)
        self._uri = untrailingslashit(uri)

        if host is None:
            plugins_dir = self.settings.plugins_dir or str(Path(self._path or "/").resolve().parent)
            host = HookHost(plugins_dir)
        self.host = host

        self.assets = AssetResolver(
            manifest_path=Path(self.path(f"{self.settings.public_dir}/{self.settings.manifest_file}")),
            base_uri=self._uri,
            public_dir=self.settings.public_dir,
        )
        self.components = registry if registry is not None else ComponentRegistry()

        self.register_default_components()

    @classmethod
    def from_settings(cls, settings: Settings | None = None, host: Host | None = None) -> Plugin:
        """Build a plugin from the configured path and URI."""
        settings = settings or default_settings
        return cls(settings.plugin_path, settings.plugin_uri, host=host, settings=settings)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def boot(self) -> None:
        """Bootstraps the components."""
        # Load translations.
        self.host.add_action(HOOK_PLUGINS_LOADED, self.load_textdomain)

        self.components.boot_all(self)
        logger.info("Plugin booted: %s", self.settings.text_domain)

    def load_textdomain(self) -> bool:
        """Load the plugin text domain from the language directory."""
        return self.host.load_plugin_textdomain(
            self.settings.text_domain,
            False,
            self.host.plugin_basename(self.path(self.settings.lang_dir)),
        )

    # ── Paths ─────────────────────────────────────────────────────────────────

    def path(self, file: str = "") -> str:
        """Returns the plugin path, optionally joined with a relative file."""
        return join(self._path, file)

    def uri(self, file: str = "") -> str:
        """Returns the plugin URI, optionally joined with a relative file."""
        return join(self._uri, file)

    def asset(self, path: str) -> str:
        """Returns the cache-busted URL of a file in the `public` folder."""
        return self.assets.resolve(path)

    # ── Components ────────────────────────────────────────────────────────────

    def register_default_components(self) -> None:
        for identifier in self.settings.default_components:
            self.register_component(identifier)

    def register_component(self, identifier: str) -> Component:
        return self.components.register(identifier)

    def get_component(self, identifier: str) -> Component:
        return self.components.get(identifier)
