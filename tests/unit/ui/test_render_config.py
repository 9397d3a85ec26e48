"""Tests for render configs, themes and style application."""

from __future__ import annotations

import json
import unittest
from unittest import mock

from lazyinquire import config
from lazyinquire.errors import InvalidConfigurationError
from lazyinquire.ui import render_config as rc


class RenderConfigTests(unittest.TestCase):
    def test_stylize_uses_pygments_ansiformat(self) -> None:
        self.assertEqual(rc.stylize("*red*", "x"), "\x1b[01m\x1b[31mx\x1b[39;49;00m")
        self.assertEqual(rc.stylize("", "x"), "x")
        self.assertEqual(rc.stylize("red", ""), "")

    def test_unknown_style_is_rejected(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            rc.RenderConfig(error_style="not-a-color")

    def test_style_validation_matches_ansiformat_wrappers(self) -> None:
        self.assertTrue(rc.is_valid_style("+*_blue_*+"))
        self.assertTrue(rc.is_valid_style(""))
        self.assertFalse(rc.is_valid_style("*nope*"))

    def test_empty_config_has_no_styles_but_keeps_symbols(self) -> None:
        empty = rc.RenderConfig.empty()
        self.assertTrue(empty.is_plain())
        self.assertEqual(empty.prompt_prefix, "?")
        self.assertFalse(rc.RenderConfig.default_colored().is_plain())

    def test_resolve_render_config_falls_back_to_default(self) -> None:
        self.assertIs(rc.resolve_render_config("ocean"), rc.OCEAN_RENDER_CONFIG)
        self.assertIs(rc.resolve_render_config(" OCEAN "), rc.OCEAN_RENDER_CONFIG)
        self.assertIs(rc.resolve_render_config("missing"), rc.DEFAULT_RENDER_CONFIG)
        self.assertIs(rc.resolve_render_config("ocean", no_color=True), rc.PLAIN_RENDER_CONFIG)

    def test_no_color_environment_forces_plain(self) -> None:
        with mock.patch.dict("lazyinquire.ui.render_config.os.environ", {"NO_COLOR": "1"}):
            self.assertIs(rc.resolve_render_config("ocean"), rc.PLAIN_RENDER_CONFIG)

    def test_global_config_loads_theme_from_user_config(self) -> None:
        config.CONFIG_PATH.write_text(json.dumps({"theme": "ocean"}), encoding="utf-8")
        rc.set_global_render_config(None)
        self.assertIs(rc.get_global_render_config(), rc.OCEAN_RENDER_CONFIG)

        rc.set_global_render_config(rc.PLAIN_RENDER_CONFIG)
        self.assertIs(rc.get_global_render_config(), rc.PLAIN_RENDER_CONFIG)

    def test_replace_returns_updated_copy(self) -> None:
        base = rc.RenderConfig.empty()
        updated = base.replace(prompt_prefix="»")
        self.assertEqual(updated.prompt_prefix, "»")
        self.assertEqual(base.prompt_prefix, "?")


if __name__ == "__main__":
    unittest.main()
