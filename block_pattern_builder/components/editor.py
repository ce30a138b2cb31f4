"""
Block Editor Component

Queues the plugin's editor script and stylesheet when the host renders the
block editor. Asset URLs go through the plugin's manifest so cached copies
are busted on each build.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from block_pattern_builder.components.base import Component
from block_pattern_builder.hooks import HOOK_ENQUEUE_BLOCK_EDITOR_ASSETS

if TYPE_CHECKING:
    from block_pattern_builder.plugin import Plugin

logger = logging.getLogger(__name__)

EDITOR_HANDLE = "block-pattern-builder-editor"
EDITOR_SCRIPT = "js/editor.js"
EDITOR_STYLE = "css/editor.css"
EDITOR_SCRIPT_DEPS: list[str] = [
    "wp-blocks",
    "wp-components",
    "wp-data",
    "wp-edit-post",
    "wp-element",
    "wp-i18n",
    "wp-plugins",
]


class Editor(Component):
    def __init__(self) -> None:
        self.plugin: Plugin | None = None

    def boot(self, plugin: Plugin) -> None:
        self.plugin = plugin
        plugin.host.add_action(HOOK_ENQUEUE_BLOCK_EDITOR_ASSETS, self.enqueue_assets)

    def enqueue_assets(self) -> None:
        """Queue the editor script, its translations and the editor stylesheet."""
        if self.plugin is None:
            logger.warning("Editor assets requested before the component was booted")
            return

        plugin = self.plugin
        plugin.host.enqueue_script(EDITOR_HANDLE, plugin.asset(EDITOR_SCRIPT), EDITOR_SCRIPT_DEPS)
        plugin.host.set_script_translations(
            EDITOR_HANDLE,
            plugin.settings.text_domain,
            plugin.path(plugin.settings.lang_dir),
        )
        plugin.host.enqueue_style(EDITOR_HANDLE, plugin.asset(EDITOR_STYLE))
