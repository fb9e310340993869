#!/usr/bin/env python3
"""
Error types raised by the Nordnet decoder and the Dinero writer.

The converter itself never raises for transaction content; everything that
can fail lives at the file boundaries and is reported with one of these.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""


class NordLedgerError(Exception):
    """Base class for all errors raised by the importer."""


class DecodeError(NordLedgerError):
    """The transaction export could not be read or a row could not be parsed."""

    def __init__(self, message: str, row: int | None = None, column: str | None = None) -> None:
        self.row = row
        self.column = column
        location = []
        if row is not None:
            location.append(f"row {row}")
        if column is not None:
            location.append(f"column '{column}'")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class LedgerWriteError(NordLedgerError):
    """The ledger file could not be written. Nothing is left at the destination."""
