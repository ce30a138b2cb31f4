"""
Host Hook Constants

Names of the host platform actions the plugin and its components attach to.
"""

from __future__ import annotations

# ── Lifecycle ─────────────────────────────────────────────────────────────────
HOOK_PLUGINS_LOADED = "plugins_loaded"
HOOK_INIT = "init"

# ── Block editor ──────────────────────────────────────────────────────────────
HOOK_ENQUEUE_BLOCK_EDITOR_ASSETS = "enqueue_block_editor_assets"

DEFAULT_PRIORITY = 10
