#!/usr/bin/env python3
"""
Tests for the config.py module.
"""

import os
import sys
import argparse
import unittest

# Add parent directory to path to import the main module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from commit_picker.config import Configuration, DEFAULT_CONFIG
from commit_picker.commit_picker import parse_arguments


class TestConfiguration(unittest.TestCase):
    """Tests for the Configuration class."""

    def test_default_config(self):
        """Configuration starts from the default values."""
        config = Configuration()
        for key, value in DEFAULT_CONFIG.items():
            self.assertEqual(config.get(key), value)

    def test_defaults_not_shared(self):
        """Changing one configuration does not touch the defaults."""
        config = Configuration()
        config.set("page_size", 2)
        self.assertEqual(DEFAULT_CONFIG["page_size"], 4)
        self.assertEqual(Configuration().get("page_size"), 4)

    def test_get_missing_key(self):
        """Missing keys return the given default."""
        config = Configuration()
        self.assertIsNone(config.get("nonexistent"))
        self.assertEqual(config.get("nonexistent", "fallback"), "fallback")

    def test_keys_are_flat(self):
        """Keys are plain names; a dotted key is just another key."""
        config = Configuration()
        config.set("theme.name", "nord")
        self.assertEqual(config.get("theme.name"), "nord")
        self.assertEqual(config.get("theme"), "standard")

    def test_update_from_args(self):
        """Parsed command-line flags override the defaults."""
        args = parse_arguments(["--page-size", "3", "--theme", "monokai", "--no-emoji",
                                "--no-color", "--char-limit", "72", "--repo-path", "/tmp/repo"])
        config = Configuration()
        config.update_from_args(args)
        self.assertEqual(config.get("page_size"), 3)
        self.assertEqual(config.get("theme"), "monokai")
        self.assertFalse(config.get("show_emoji"))
        self.assertFalse(config.get("use_color"))
        self.assertEqual(config.get("char_limit"), 72)
        self.assertEqual(config.get("repo_path"), "/tmp/repo")
        self.assertEqual(config.effective_page_size, 3)

    def test_update_from_args_keeps_defaults(self):
        """Flags that were not given leave the defaults alone."""
        config = Configuration()
        config.update_from_args(parse_arguments([]))
        self.assertEqual(config.config, DEFAULT_CONFIG)

    def test_single_page(self):
        """--single-page means no page size limit."""
        config = Configuration()
        config.update_from_args(argparse.Namespace(single_page=True))
        self.assertIsNone(config.effective_page_size)


if __name__ == "__main__":
    unittest.main()
