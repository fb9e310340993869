#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

# Standard library imports
import logging
import os
import stat
import sys
import tempfile

# Third-party imports
import pandas as pd
from tabulate import tabulate

# Local application imports
import constants as const
import util
from errors import LedgerWriteError
from ledger_entry import LedgerEntry


# Get a logger instance
logger = logging.getLogger(__name__)

class DineroLedger:

    def __init__(self, entries: list[LedgerEntry]) -> None:
        self.entries = list(entries)

    @classmethod
    def headers(cls) -> list:
        return list(const.DINERO_COLUMNS)

    def rows(self) -> list[list]:
        return [
            [
                e.voucher,
                util.to_dinero_date(e.date),
                e.text,
                e.account,
                e.account_vat_type,
                util.to_dinero_amount(e.amount),
                util.to_dinero_amount(e.foreign_amount),
                e.balance_account,
                e.balance_account_vat_type,
            ]
            for e in self.entries
        ]

    def as_df(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows(), columns=self.headers())

    def as_csv_str(self) -> str:
        return self.as_df().to_csv(sep=const.DINERO_DELIMITER, index=False)

    def as_str(self) -> str:
        if not self.entries:
            return "No records found."

        table_str = tabulate(self.rows(), headers=self.headers(), stralign="right")
        return table_str

    def write(self, fname: str) -> str:
        """
        Write the ledger as a Dinero import file.

        The file is written to a temporary file next to the destination and
        moved into place, so a failed write never leaves a partial ledger.
        '-' writes to stdout.
        """
        content = self.as_csv_str()

        if fname == "-":
            sys.stdout.write(content)
            sys.stdout.flush()
            logger.info(f"Wrote {len(self.entries)} entries to stdout")
            return fname

        directory = os.path.dirname(os.path.abspath(fname))
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile("w", encoding=const.DINERO_ENCODING, newline="",
                                             dir=directory, prefix=".nordledger-", suffix=".tmp",
                                             delete=False) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.chmod(tmp_name, target_mode(fname))
            os.replace(tmp_name, fname)
        except OSError as e:
            logger.error(f"Failed to write ledger {fname}: {e}", exc_info=True)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise LedgerWriteError(f"Unable to write {fname}: {e}") from e

        logger.info(f"Wrote {len(self.entries)} entries to {fname}")
        return fname


def target_mode(fname: str) -> int:
    """Permissions for the written ledger: keep an existing file's mode, else 0o666 minus the umask."""
    if os.path.exists(fname):
        return stat.S_IMODE(os.stat(fname).st_mode)

    # The umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
