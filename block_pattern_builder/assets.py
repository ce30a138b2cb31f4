"""
Asset Resolver

Maps relative asset paths to cache-busted public URLs using the build tool's
`mix-manifest.json`. The manifest is read from disk at most once per
resolver; a missing or malformed manifest degrades to passthrough URLs.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType

from block_pattern_builder.exceptions import ManifestError
from block_pattern_builder.utils.paths import join, leadingslashit, untrailingslashit

logger = logging.getLogger(__name__)

EMPTY_MANIFEST: Mapping[str, str] = MappingProxyType({})


# ── Manifest I/O ──────────────────────────────────────────────────────────────


def parse_manifest(raw: str, source: str = "<string>") -> Mapping[str, str]:
    """
    Parse manifest JSON text into a read-only mapping.

    Raises:
        ManifestError: the text is not JSON or not a JSON object.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, over-long integers, deep nesting
        raise ManifestError(f"Manifest is not valid JSON: {exc}", path=source) from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object, got {type(data).__name__}", path=source)

    entries: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            logger.warning("Skipping manifest entry %r in %s: value is not a string", key, source)
            continue
        entries[key] = value
    return MappingProxyType(entries)


def load_manifest(path: Path) -> Mapping[str, str]:
    """
    Load the build manifest from disk.

    Returns an empty mapping if the file does not exist or cannot be used.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No asset manifest at %s; serving unversioned asset paths", path)
        return EMPTY_MANIFEST
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read asset manifest %s: %s", path, exc)
        return EMPTY_MANIFEST

    try:
        manifest = parse_manifest(raw, source=str(path))
    except ManifestError as exc:
        logger.warning("Ignoring asset manifest: %s", exc.message, extra={"manifest": str(path)})
        return EMPTY_MANIFEST

    logger.debug("Loaded %d asset manifest entries from %s", len(manifest), path)
    return manifest


# ── Resolver ──────────────────────────────────────────────────────────────────


class AssetResolver:
    """
    Resolves relative asset paths to public URLs.

    Args:
        manifest_path: Location of `mix-manifest.json`.
        base_uri:      Public URI of the plugin root.
        public_dir:    Subdirectory holding built assets, joined after base_uri.
        loader:        Callable reading a manifest path; called at most once.
    """

    def __init__(
        self,
        manifest_path: Path,
        base_uri: str,
        public_dir: str = "public",
        loader: Callable[[Path], Mapping[str, str]] = load_manifest,
    ) -> None:
        self.manifest_path = Path(manifest_path)
        self.base_uri = untrailingslashit(base_uri)
        self.public_dir = public_dir.strip("/")
        self._loader = loader
        self._manifest: Mapping[str, str] | None = None

    @property
    def loaded(self) -> bool:
        """True once the manifest load has been attempted."""
        return self._manifest is not None

    @property
    def manifest(self) -> Mapping[str, str]:
        if self._manifest is None:
            self._manifest = self._loader(self.manifest_path)
        return self._manifest

    def resolve(self, path: str) -> str:
        """Return the public URL for `path`, versioned when the manifest knows it."""
        key = leadingslashit(path)
        versioned = self.manifest.get(key)
        if versioned is not None:
            key = leadingslashit(versioned)
        return join(self.base_uri, self.public_dir + key)
