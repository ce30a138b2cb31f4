"""
Pytest configuration and fixtures for Block Pattern Builder tests
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from block_pattern_builder.config import Settings  # noqa: E402
from block_pattern_builder.host import HookHost  # noqa: E402
from block_pattern_builder.plugin import Plugin  # noqa: E402

BASE_URI = "https://example.com/wp-content/plugins/bpb"
MANIFEST = {"/js/app.js": "/js/app.a1b2c3.js", "/js/editor.js": "/js/editor.f00d.js"}


@pytest.fixture
def plugin_settings():
    """Settings isolated from BPB_* environment variables and .env files."""
    return Settings(
        _env_file=None,
        plugin_path=".",
        plugin_uri=BASE_URI,
        text_domain="block-pattern-builder",
        lang_dir="public/lang",
        public_dir="public",
        manifest_file="mix-manifest.json",
        default_components=["Editor"],
    )


@pytest.fixture
def plugins_dir(tmp_path):
    return tmp_path / "plugins"


@pytest.fixture
def plugin_dir(plugins_dir):
    """A plugin install with a public/ folder, a manifest and a lang/ folder."""
    root = plugins_dir / "bpb"
    (root / "public" / "lang").mkdir(parents=True)
    (root / "public" / "mix-manifest.json").write_text(json.dumps(MANIFEST), encoding="utf-8")
    return root


@pytest.fixture
def host(plugins_dir):
    return HookHost(plugins_dir)


@pytest.fixture
def plugin(plugin_dir, host, plugin_settings):
    return Plugin(str(plugin_dir), BASE_URI, host=host, settings=plugin_settings)
