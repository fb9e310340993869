#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import sys
import os
# Add src to path for imports (needed when running test file directly)
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, SRC_DIR)

import importlib
import unittest

# Installed as top-level names, see [tool.setuptools] in pyproject.toml
MODULES = ["constants", "converter", "dinero_ledger", "errors", "ledger_cli", "ledger_entry", "transaction", "util"]
PACKAGES = ["brokers", "cli"]


class TestTopLevelModules(unittest.TestCase):
    """Another distribution shipping a module of the same name must not shadow ours"""

    def assertFromSrc(self, name, path):
        self.assertEqual(os.path.commonpath([SRC_DIR, os.path.abspath(path)]), SRC_DIR,
                         f"'{name}' imported from {path}")

    def test_modules(self):
        for name in MODULES:
            module = importlib.import_module(name)
            self.assertFromSrc(name, module.__file__)

    def test_packages(self):
        for name in PACKAGES:
            package = importlib.import_module(name)
            self.assertFromSrc(name, package.__file__)

    def test_cli_submodule(self):
        module = importlib.import_module("cli.convert")
        self.assertFromSrc("cli.convert", module.__file__)
        self.assertTrue(hasattr(module, "run_conversion"))


if __name__ == '__main__':
    unittest.main()
