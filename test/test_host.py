"""
Host Platform Tests

Test classes:
    TestHookHostActions     — add_action / do_action / has_action
    TestHookHostTextdomain  — plugin_basename + load_plugin_textdomain
    TestHookHostEnqueue     — script and style queues
    TestHooks               — hook name constants
"""

from __future__ import annotations


# ══════════════════════════════════════════════════════════════════════════════
# 1. TestHookHostActions
# ══════════════════════════════════════════════════════════════════════════════


class TestHookHostActions:
    def test_do_action_calls_callback(self, host):
        called = []
        host.add_action("init", lambda: called.append("init"))
        host.do_action("init")
        assert called == ["init"]

    def test_do_action_passes_arguments(self, host):
        host.add_action("save", lambda post_id: post_id * 2)
        assert host.do_action("save", 21) == [42]

    def test_do_action_unknown_hook_returns_empty(self, host):
        assert host.do_action("no.subscribers") == []

    def test_priority_order(self, host):
        order = []
        host.add_action("init", lambda: order.append("late"), priority=20)
        host.add_action("init", lambda: order.append("early"), priority=5)
        host.add_action("init", lambda: order.append("default-1"))
        host.add_action("init", lambda: order.append("default-2"))
        host.do_action("init")
        assert order == ["early", "default-1", "default-2", "late"]

    def test_failing_callback_does_not_stop_others(self, host, caplog):
        def broken():
            msg = "boom"
            raise ValueError(msg)

        host.add_action("init", broken)
        host.add_action("init", lambda: "ok")
        assert host.do_action("init") == ["ok"]
        assert "boom" in caplog.text

    def test_has_action(self, host):
        def callback():
            return None

        assert not host.has_action("init")
        host.add_action("init", callback)
        assert host.has_action("init")
        assert host.has_action("init", callback)
        assert not host.has_action("init", lambda: None)


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestHookHostTextdomain
# ══════════════════════════════════════════════════════════════════════════════


class TestHookHostTextdomain:
    def test_plugin_basename_inside_plugins_dir(self, host, plugin_dir):
        assert host.plugin_basename(str(plugin_dir / "public" / "lang")) == "bpb/public/lang"

    def test_plugin_basename_outside_plugins_dir(self, host):
        assert host.plugin_basename("/elsewhere/lang") == "/elsewhere/lang"

    def test_load_textdomain_records_call(self, host, plugin_dir):
        assert host.load_plugin_textdomain("bpb", False, "bpb/public/lang") is True
        assert host.textdomains[0].domain == "bpb"
        assert host.textdomains[0].rel_path == "bpb/public/lang"

    def test_load_textdomain_missing_directory(self, host):
        assert host.load_plugin_textdomain("bpb", False, "bpb/missing") is False
        assert len(host.textdomains) == 1


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestHookHostEnqueue
# ══════════════════════════════════════════════════════════════════════════════


class TestHookHostEnqueue:
    def test_enqueue_script(self, host):
        host.enqueue_script("app", "https://cdn/app.js", ["wp-element"], "1.0")
        script = host.scripts["app"]
        assert script.src == "https://cdn/app.js"
        assert script.deps == ["wp-element"]
        assert script.version == "1.0"

    def test_enqueue_style_default_deps(self, host):
        host.enqueue_style("app", "https://cdn/app.css")
        assert host.styles["app"].deps == []

    def test_script_translations_require_enqueued_script(self, host):
        assert host.set_script_translations("missing", "bpb", "/lang") is False
        host.enqueue_script("app", "https://cdn/app.js")
        assert host.set_script_translations("app", "bpb", "/lang") is True
        assert host.script_translations["app"] == ("bpb", "/lang")


# ══════════════════════════════════════════════════════════════════════════════
# 4. TestHooks
# ══════════════════════════════════════════════════════════════════════════════


class TestHooks:
    def test_hook_names(self):
        from block_pattern_builder.hooks import (
            HOOK_ENQUEUE_BLOCK_EDITOR_ASSETS,
            HOOK_INIT,
            HOOK_PLUGINS_LOADED,
        )

        assert HOOK_PLUGINS_LOADED == "plugins_loaded"
        assert HOOK_INIT == "init"
        assert HOOK_ENQUEUE_BLOCK_EDITOR_ASSETS == "enqueue_block_editor_assets"
