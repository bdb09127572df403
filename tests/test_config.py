"""Tests for config loading and input sanitization.

Malformed or missing config data must fall back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazylaunch import config
from lazylaunch.ui_theme import DEFAULT_THEME, MONO_THEME, available_theme_names, resolve_theme


class ConfigBehaviorTests(unittest.TestCase):
    def _load_from(self, payload: object) -> config.LauncherConfig:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps(payload), encoding="utf-8")
            with mock.patch("lazylaunch.config.CONFIG_PATH", config_path):
                return config.load_config()

    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazylaunch.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), config.LauncherConfig())

    def test_valid_values_are_loaded_and_unknown_keys_ignored(self) -> None:
        loaded = self._load_from({"prompt": "run: ", "theme": "mono", "highlight_symbol": "> ", "extra": 1})
        self.assertEqual(loaded, config.LauncherConfig(prompt="run: ", theme="mono", highlight_symbol="> "))

    def test_malformed_json_is_logged_and_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazylaunch.config.CONFIG_PATH", config_path):
                with self.assertLogs("lazylaunch.config", level="WARNING"):
                    self.assertEqual(config.load_config_data(), {})

    def test_non_object_json_is_ignored(self) -> None:
        self.assertEqual(self._load_from([1, 2]), config.LauncherConfig())

    def test_invalid_values_fall_back_per_key(self) -> None:
        loaded = self._load_from({"prompt": 42, "theme": "   ", "highlight_symbol": "a\nb"})
        self.assertEqual(loaded, config.LauncherConfig())

    def test_empty_prompt_is_allowed(self) -> None:
        self.assertEqual(self._load_from({"prompt": ""}).prompt, "")


class ThemeSelectionTests(unittest.TestCase):
    def test_resolve_known_and_unknown_names(self) -> None:
        self.assertIs(resolve_theme("mono"), MONO_THEME)
        self.assertIs(resolve_theme(" MONO "), MONO_THEME)
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertEqual(available_theme_names(), ("default", "mono"))

    def test_highlight_symbol_override(self) -> None:
        theme = resolve_theme("default", "* ")
        self.assertEqual(theme.highlight_symbol, "* ")
        self.assertEqual(theme.highlight, DEFAULT_THEME.highlight)
        self.assertIs(resolve_theme("default", ">> "), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
