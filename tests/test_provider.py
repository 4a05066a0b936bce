#!/usr/bin/env python3
"""
Provider, element, configuration and logging tests.
"""
from __future__ import annotations

import asyncio
import io
import json
import logging
import os
import unittest
from unittest.mock import patch

from externaltext import (
    ExternalText,
    ExternalTextConfig,
    MarkdownFragment,
    RenderModeError,
    TextBundleProvider,
    TextRenderer,
    build_text_renderer,
    current_provider,
    current_texts,
)
from externaltext.logging.factory import DefaultLoggerFactory
from externaltext.logging.helpers import JsonLogFormatter, get_logger, trace_eval

DEFAULT_TEXTS = {"title": "Default title", "hello": "Hi ${who}"}
LOADED_TEXTS = {"title": "Loaded title", "hello": "Hello ${who}"}


# --------------------------------------------------------------------------- #
#  1. TextBundleProvider                                                      #
# --------------------------------------------------------------------------- #
class ProviderTests(unittest.TestCase):
    def test_default_snapshot(self) -> None:
        provider = TextBundleProvider(DEFAULT_TEXTS)
        self.assertIs(provider.texts, DEFAULT_TEXTS)
        self.assertEqual(provider.get("title"), "Default title")

    def test_without_bundle_renders_placeholder(self) -> None:
        provider = TextBundleProvider()
        self.assertIsNone(provider.texts)
        self.assertEqual(provider.get("title"), "{{title}}")

    def test_set_texts_replaces_snapshot(self) -> None:
        provider = TextBundleProvider(DEFAULT_TEXTS)
        provider.set_texts(LOADED_TEXTS)
        self.assertEqual(provider.get("hello", {"who": "you"}), "Hello you")

    def test_sync_loader(self) -> None:
        calls = []

        def loader(set_texts):
            calls.append(set_texts)
            set_texts(LOADED_TEXTS)

        provider = TextBundleProvider(DEFAULT_TEXTS, load_texts=loader)
        self.assertEqual(provider.get("title"), "Default title")
        self.assertIsNone(provider.load())
        self.assertEqual(len(calls), 1)
        self.assertEqual(provider.get("title"), "Loaded title")

    def test_async_loader(self) -> None:
        async def loader(set_texts):
            await asyncio.sleep(0)
            set_texts(LOADED_TEXTS)

        provider = TextBundleProvider(DEFAULT_TEXTS, load_texts=loader)
        asyncio.run(provider.aload())
        self.assertEqual(provider.get("title"), "Loaded title")

    def test_load_returns_awaitable(self) -> None:
        async def loader(set_texts):
            set_texts(LOADED_TEXTS)

        provider = TextBundleProvider(DEFAULT_TEXTS, load_texts=loader)
        pending = provider.load()
        self.assertIsNotNone(pending)
        self.assertEqual(provider.get("title"), "Default title")
        asyncio.run(pending)
        self.assertEqual(provider.get("title"), "Loaded title")

    def test_no_loader(self) -> None:
        self.assertIsNone(TextBundleProvider(DEFAULT_TEXTS).load())

    def test_custom_renderer(self) -> None:
        renderer = TextRenderer(config=ExternalTextConfig(default_mode="raw"))
        provider = TextBundleProvider(DEFAULT_TEXTS, renderer=renderer)
        self.assertEqual(provider.get("hello", mode="raw"), "Hi ${who}")


# --------------------------------------------------------------------------- #
#  2. Ambient provider and ExternalText elements                              #
# --------------------------------------------------------------------------- #
class AmbientTests(unittest.TestCase):
    def test_activate_binds_and_restores(self) -> None:
        outer = TextBundleProvider(DEFAULT_TEXTS)
        inner = TextBundleProvider(LOADED_TEXTS)
        self.assertIsNone(current_provider())
        with outer.activate():
            self.assertIs(current_provider(), outer)
            with inner.activate():
                self.assertIs(current_texts(), LOADED_TEXTS)
            self.assertIs(current_provider(), outer)
        self.assertIsNone(current_provider())
        self.assertIsNone(current_texts())

    def test_element_uses_ambient_provider(self) -> None:
        element = ExternalText("title")
        with TextBundleProvider(DEFAULT_TEXTS).activate():
            out = element.render()
        self.assertIsInstance(out, MarkdownFragment)
        self.assertIn("Default title", out.html)

    def test_element_explicit_provider_and_mode(self) -> None:
        element = ExternalText("hello", data={"who": "there"}, mode="string")
        self.assertEqual(element.render(TextBundleProvider(DEFAULT_TEXTS)), "Hi there")

    def test_element_without_provider(self) -> None:
        self.assertEqual(ExternalText("title", mode="raw").render(), "{{title}}")

    def test_element_is_read_only_value(self) -> None:
        source = {"who": "there"}
        element = ExternalText(["hello"], data=source, mode="string")
        source["who"] = "changed"
        self.assertEqual(element.path, ("hello",))
        self.assertEqual(element.data["who"], "there")
        with self.assertRaises(TypeError):
            element.data["who"] = "x"  # type: ignore[index]
        self.assertEqual(element, ExternalText(("hello",), data={"who": "there"}, mode="string"))
        with self.assertRaises(TypeError):
            hash(element)
        self.assertEqual(element.render(TextBundleProvider(DEFAULT_TEXTS)), "Hi there")

    def test_element_static_surface(self) -> None:
        self.assertEqual(ExternalText.get(DEFAULT_TEXTS, "title"), "Default title")
        self.assertIs(ExternalText.Provider, TextBundleProvider)


# --------------------------------------------------------------------------- #
#  3. Configuration                                                           #
# --------------------------------------------------------------------------- #
class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ExternalTextConfig()
        self.assertEqual(cfg.default_mode, "string")
        self.assertIsNone(cfg.max_passes)
        self.assertTrue(cfg.allow_html)
        self.assertEqual(cfg.placeholder("a.b"), "{{a.b}}")

    def test_alias_normalized(self) -> None:
        self.assertEqual(ExternalTextConfig(default_mode="markup").default_mode, "markdown")

    def test_invalid_values(self) -> None:
        with self.assertRaises(RenderModeError):
            ExternalTextConfig(default_mode="html")
        with self.assertRaises(ValueError):
            ExternalTextConfig(max_passes=0)
        with self.assertRaises(ValueError):
            ExternalTextConfig(placeholder_template="missing")

    def test_from_env(self) -> None:
        env = {
            "EXTERNALTEXT_DEFAULT_MODE": "raw",
            "EXTERNALTEXT_MAX_PASSES": "25",
            "EXTERNALTEXT_ALLOW_HTML": "false",
            "EXTERNALTEXT_MARKDOWN_EXTENSIONS": "tables, fenced_code",
        }
        cfg = ExternalTextConfig.from_env(env)
        self.assertEqual(cfg.default_mode, "raw")
        self.assertEqual(cfg.max_passes, 25)
        self.assertFalse(cfg.allow_html)
        self.assertEqual(cfg.markdown_extensions, ("tables", "fenced_code"))

    def test_from_env_zero_passes_is_unbounded(self) -> None:
        self.assertIsNone(ExternalTextConfig.from_env({"EXTERNALTEXT_MAX_PASSES": "0"}).max_passes)

    def test_from_env_bad_int(self) -> None:
        with self.assertRaises(ValueError):
            ExternalTextConfig.from_env({"EXTERNALTEXT_MAX_PASSES": "lots"})

    def test_from_os_environ(self) -> None:
        with patch.dict(os.environ, {"EXTERNALTEXT_DEFAULT_MODE": "markdown"}):
            self.assertEqual(ExternalTextConfig.from_env().default_mode, "markdown")

    def test_built_renderer_honors_config(self) -> None:
        renderer = build_text_renderer(ExternalTextConfig(default_mode="raw"))
        self.assertEqual(renderer.get(DEFAULT_TEXTS, "hello"), "Hi ${who}")

    def test_built_renderer_evaluates_by_default(self) -> None:
        renderer = build_text_renderer()
        self.assertEqual(renderer.get(DEFAULT_TEXTS, "hello", {"who": "all"}), "Hi all")


# --------------------------------------------------------------------------- #
#  4. Logging                                                                 #
# --------------------------------------------------------------------------- #
class LoggingTests(unittest.TestCase):
    def test_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "externaltext")
        self.assertEqual(get_logger("render").name, "externaltext.render")
        self.assertEqual(get_logger("externaltext.render").name, "externaltext.render")

    def test_json_formatter(self) -> None:
        record = logging.LogRecord("externaltext.render", logging.INFO, __file__, 1, "hi %s", ("x",), None)
        record.context = {"path": "a.b"}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["msg"], "hi x")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["ctx"], {"path": "a.b"})
        self.assertIn("version", payload)

    def test_factory_configures_base_logger(self) -> None:
        base = logging.getLogger("externaltext")
        saved = list(base.handlers)
        saved_level = base.level
        base.handlers.clear()
        try:
            stream = io.StringIO()
            log = DefaultLoggerFactory(level=logging.INFO, stream=stream).get_logger("provider")
            log.info("bundle ready")
            self.assertIn("bundle ready", stream.getvalue())
        finally:
            base.handlers[:] = saved
            base.propagate = True
            base.setLevel(saved_level)

    def test_trace_eval_gated(self) -> None:
        log = get_logger("processing.interpolate")
        with patch.dict(os.environ, {"EXTERNALTEXT_TRACE_EVAL": "1"}):
            with self.assertLogs(log, level=logging.DEBUG) as cm:
                trace_eval(log, "interpolation pass", n=1)
        self.assertTrue(any("interpolation pass" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
