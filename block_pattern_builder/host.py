"""
Host Platform Interface

Host: the surface of the CMS host the plugin talks to (actions, text
domains, script and style enqueueing).

HookHost: an in-process implementation used by the dev server and tests.
Actions run in priority order; a failing callback is logged and the
remaining callbacks still run.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from block_pattern_builder.hooks import DEFAULT_PRIORITY

logger = logging.getLogger(__name__)


class Host(Protocol):
    def add_action(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None: ...

    def do_action(self, hook_name: str, *args: Any) -> list[Any]: ...

    def has_action(self, hook_name: str, callback: Callable[..., Any] | None = None) -> bool: ...

    def load_plugin_textdomain(self, domain: str, deprecated: bool, rel_path: str) -> bool: ...

    def plugin_basename(self, path: str) -> str: ...

    def enqueue_script(
        self, handle: str, src: str, deps: list[str] | None = None, version: str | None = None
    ) -> None: ...

    def enqueue_style(
        self, handle: str, src: str, deps: list[str] | None = None, version: str | None = None
    ) -> None: ...

    def set_script_translations(self, handle: str, domain: str, path: str) -> bool: ...


@dataclass
class EnqueuedAsset:
    """A script or stylesheet queued for output by the host."""

    handle: str
    src: str
    deps: list[str] = field(default_factory=list)
    version: str | None = None


@dataclass
class TextdomainLoad:
    """Arguments of one load_plugin_textdomain() call."""

    domain: str
    deprecated: bool
    rel_path: str


class HookHost:
    """
    In-process host platform.

    Args:
        plugins_dir: Directory that plugin basenames and language paths are
                     relative to.
    """

    def __init__(self, plugins_dir: str | Path = ".") -> None:
        self.plugins_dir = Path(plugins_dir)
        self._actions: dict[str, list[tuple[int, Callable[..., Any]]]] = defaultdict(list)
        self.textdomains: list[TextdomainLoad] = []
        self.scripts: dict[str, EnqueuedAsset] = {}
        self.styles: dict[str, EnqueuedAsset] = {}
        self.script_translations: dict[str, tuple[str, str]] = {}

    # ── Actions ───────────────────────────────────────────────────────────────

    def add_action(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Attach a callback to an action hook."""
        self._actions[hook_name].append((priority, callback))
        logger.debug("Action added: %s (priority %d)", hook_name, priority, extra={"hook": hook_name})

    def has_action(self, hook_name: str, callback: Callable[..., Any] | None = None) -> bool:
        """Return True if the hook has any callback, or the given callback."""
        registered = self._actions.get(hook_name, [])
        if callback is None:
            return bool(registered)
        return any(cb == callback for _, cb in registered)

    def do_action(self, hook_name: str, *args: Any) -> list[Any]:
        """
        Fire an action hook.

        Callbacks run in ascending priority, then in the order they were
        added. Exceptions are caught and logged.

        Returns:
            List of return values from callbacks that completed.
        """
        results: list[Any] = []
        # sorted() is stable, so equal priorities keep insertion order
        for _, callback in sorted(self._actions.get(hook_name, []), key=lambda entry: entry[0]):
            try:
                results.append(callback(*args))
            except Exception as exc:
                logger.warning(
                    "Action %s callback %r raised: %s",
                    hook_name,
                    callback,
                    exc,
                    extra={"hook": hook_name},
                )
        return results

    # ── Localization ──────────────────────────────────────────────────────────

    def plugin_basename(self, path: str) -> str:
        """Return path relative to the plugins directory, or path unchanged."""
        try:
            return Path(path).resolve().relative_to(self.plugins_dir.resolve()).as_posix()
        except ValueError:
            return path

    def load_plugin_textdomain(self, domain: str, deprecated: bool, rel_path: str) -> bool:
        """Record a text domain load; True if the language directory exists."""
        self.textdomains.append(TextdomainLoad(domain=domain, deprecated=deprecated, rel_path=rel_path))
        found = (self.plugins_dir / rel_path).is_dir()
        logger.info("Text domain %s loaded from %s (found=%s)", domain, rel_path, found)
        return found

    def set_script_translations(self, handle: str, domain: str, path: str) -> bool:
        if handle not in self.scripts:
            logger.warning("Cannot set translations for unknown script %s", handle)
            return False
        self.script_translations[handle] = (domain, path)
        return True

    # ── Enqueueing ────────────────────────────────────────────────────────────

    def enqueue_script(
        self, handle: str, src: str, deps: list[str] | None = None, version: str | None = None
    ) -> None:
        self.scripts[handle] = EnqueuedAsset(handle=handle, src=src, deps=list(deps or []), version=version)
        logger.debug("Script enqueued: %s -> %s", handle, src, extra={"asset": src})

    def enqueue_style(
        self, handle: str, src: str, deps: list[str] | None = None, version: str | None = None
    ) -> None:
        self.styles[handle] = EnqueuedAsset(handle=handle, src=src, deps=list(deps or []), version=version)
        logger.debug("Style enqueued: %s -> %s", handle, src, extra={"asset": src})
