"""
CLI Module

Command-line interface for the Nordnet to Dinero importer using Click.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

from cli.convert import convert, preview


__all__ = ["convert", "preview"]
