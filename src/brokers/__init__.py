"""
Broker CSV import processors.

This package contains the broker-specific processors that decode transaction
exports into Transaction values (currently Nordnet).

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""
