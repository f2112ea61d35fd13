"""
Tests for configuration loading.
"""

import json
import unittest
import tempfile
from pathlib import Path

from svgcomp.config import Config
from svgcomp.constants import DEFAULT_COLOR, DEFAULT_DECLARATION_TAG
from svgcomp.exceptions import ConfigurationError
from svgcomp.models import Framework
from svgcomp.utils.validators import validate_color


class TestConfig(unittest.TestCase):
    """Test build.config.json handling."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.working_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, data):
        (self.working_dir / "build.config.json").write_text(
            data if isinstance(data, str) else json.dumps(data), encoding="utf-8")

    def test_defaults_without_file(self):
        """A missing config file falls back to defaults."""
        config = Config(working_dir=self.working_dir)
        self.assertEqual(config.entry_path, self.working_dir / "src")
        self.assertEqual(config.output_path, self.working_dir / "dist")
        self.assertEqual(config.frameworks, [Framework.REACT])
        self.assertEqual(config.defaults.color, DEFAULT_COLOR)
        self.assertIsNone(config.readme)

    def test_values_loaded(self):
        self.write({
            "entry": "icons",
            "output": "lib",
            "generate": ["vue", "react", "vue"],
            "color": "#fff",
            "titleSuffix": " glyph",
            "readme": {"output": "README.md", "template": "tpl.md"},
        })
        config = Config(working_dir=self.working_dir)
        self.assertEqual(config.entry_path, self.working_dir / "icons")
        self.assertEqual(config.frameworks, [Framework.VUE, Framework.REACT])
        self.assertEqual(config.defaults.title_for("Home"), "Home glyph")
        self.assertEqual(config.readme.template, "tpl.md")
        self.assertEqual(config.readme.declaration_tag, DEFAULT_DECLARATION_TAG)
        self.assertEqual(config.get("color"), "#fff")

    def test_explicit_config_path(self):
        custom = self.working_dir / "custom.json"
        custom.write_text(json.dumps({"entry": "assets"}))
        config = Config(str(custom), working_dir=self.working_dir)
        self.assertEqual(config.entry_path, self.working_dir / "assets")

    def test_invalid_json(self):
        self.write("{not json")
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_invalid_types(self):
        self.write({"entry": 5})
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_unknown_framework(self):
        self.write({"generate": ["svelte"]})
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_unknown_formatter(self):
        self.write({"formatter": "black"})
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_invalid_color(self):
        self.write({"color": "red\" onload=\"x"})
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_readme_requires_output(self):
        self.write({"readme": {"template": "x.md"}})
        with self.assertRaises(ConfigurationError):
            Config(working_dir=self.working_dir)

    def test_unknown_keys_ignored(self):
        self.write({"entry": "src", "unused": True})
        config = Config(working_dir=self.working_dir)
        self.assertEqual(config.entry_path, self.working_dir / "src")

    def test_require_entry(self):
        config = Config(working_dir=self.working_dir)
        with self.assertRaises(ConfigurationError):
            config.require_entry()
        (self.working_dir / "src").mkdir()
        self.assertEqual(config.require_entry(), self.working_dir / "src")

    def test_project_name_sources(self):
        """projectName, then package.json, then the directory name."""
        config = Config(working_dir=self.working_dir)
        self.assertEqual(config.get_project_name(), self.working_dir.resolve().name)

        (self.working_dir / "package.json").write_text(json.dumps({"name": "my-icons"}))
        self.assertEqual(config.get_project_name(), "my-icons")

        self.write({"projectName": "@scope/icons"})
        self.assertEqual(Config(working_dir=self.working_dir).get_project_name(), "@scope/icons")


def test_validate_color():
    assert validate_color("#262626")
    assert validate_color("#abc")
    assert validate_color("currentColor")
    assert not validate_color("rgb(0, 0, 0)")
    assert not validate_color("#12")
