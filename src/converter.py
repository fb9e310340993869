#!/usr/bin/env python3
"""
Nordnet to Dinero Converter

Turns an ordered list of Nordnet transactions (oldest first) into Dinero
ledger entries in a single pass.

Booking rules:
- Purchase: one entry against the holdings account for total + fee, plus a
  brokerage fee entry on the same voucher when the fee is non-zero
- Dividend: one entry against dividend income. A withholding tax row that
  immediately follows the dividend is booked on the same voucher
- Interest: one entry against interest income
- Anything else, including a tax row without a dividend right before it, is
  dropped, logged and counted

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
from dataclasses import dataclass
from enum import Enum

import constants as const
from ledger_entry import AccountPlan, LedgerEntry
from transaction import Transaction, TransactionType


# Module-level logger
logger = logging.getLogger(__name__)


class Classification(Enum):
    """What happened to a transaction during conversion"""
    CONVERTED = "converted"
    PAIRED = "paired"
    IGNORED_UNRECOGNIZED = "ignored_unrecognized"
    IGNORED_ORPHAN_TAX = "ignored_orphan_tax"


@dataclass
class ConversionStats:
    vouchers: int = 0
    entries: int = 0
    paired_taxes: int = 0
    ignored_unrecognized: int = 0
    ignored_orphan_tax: int = 0

    @property
    def ignored(self) -> int:
        return self.ignored_unrecognized + self.ignored_orphan_tax

    def record(self, classification: Classification) -> None:
        if classification == Classification.PAIRED:
            self.paired_taxes += 1
        elif classification == Classification.IGNORED_UNRECOGNIZED:
            self.ignored_unrecognized += 1
        elif classification == Classification.IGNORED_ORPHAN_TAX:
            self.ignored_orphan_tax += 1


class Converter:

    def __init__(self, transactions: list[Transaction], next_voucher: int, accounts: AccountPlan | None = None) -> None:
        self.transactions = tuple(transactions)
        self.accounts = accounts if accounts is not None else AccountPlan.default()
        self.stats = ConversionStats()
        self._cursor = 0
        self._voucher = next_voucher
        self._converted = False

    @property
    def next_voucher(self) -> int:
        return self._voucher

    def has_more(self) -> bool:
        return self._cursor < len(self.transactions)

    def advance(self) -> Transaction:
        if not self.has_more():
            raise IndexError("No more transactions")
        t = self.transactions[self._cursor]
        self._cursor += 1
        return t

    def peek(self) -> Transaction | None:
        if not self.has_more():
            return None
        return self.transactions[self._cursor]

    def allocate_voucher(self) -> int:
        voucher = self._voucher
        self._voucher += 1
        self.stats.vouchers += 1
        return voucher

    def convert(self) -> list[LedgerEntry]:
        if self._converted:
            raise RuntimeError("Converter.convert() can only be called once")
        self._converted = True

        first_voucher = self._voucher
        logger.info(f"Converting {len(self.transactions)} transactions, first voucher {first_voucher}")

        entries: list[LedgerEntry] = []
        while self.has_more():
            t = self.advance()
            classification = self.convert_transaction(t, entries)
            self.stats.record(classification)

        self.stats.entries = len(entries)
        logger.info(f"Created {self.stats.entries} entries on {self.stats.vouchers} vouchers, "
                    f"next voucher {self._voucher}, paired taxes: {self.stats.paired_taxes}, "
                    f"dropped: {self.stats.ignored_unrecognized} unrecognized, "
                    f"{self.stats.ignored_orphan_tax} orphan tax")
        return entries

    def convert_transaction(self, t: Transaction, entries: list[LedgerEntry]) -> Classification:
        if t.transaction_type == TransactionType.PURCHASE:
            entries.extend(self.convert_purchase(t))
            return Classification.CONVERTED

        if t.transaction_type == TransactionType.DIVIDEND:
            dividend_entries, paired = self.convert_dividend(t)
            entries.extend(dividend_entries)
            if paired:
                self.stats.record(Classification.PAIRED)
            return Classification.CONVERTED

        if t.transaction_type == TransactionType.INTEREST:
            entries.extend(self.convert_interest(t))
            return Classification.CONVERTED

        if t.transaction_type == TransactionType.DIVIDEND_TAX:
            # A tax row must immediately follow its dividend
            logger.warning(f"Dropping dividend tax without preceding dividend: {t.date} {t.company} "
                           f"({t.isin}) amount {t.net_amount}")
            return Classification.IGNORED_ORPHAN_TAX

        logger.warning(f"Dropping unrecognized transaction type '{t.type_code}': {t.date} {t.company} {t.text}".rstrip())
        return Classification.IGNORED_UNRECOGNIZED

    def convert_purchase(self, t: Transaction) -> list[LedgerEntry]:
        voucher = self.allocate_voucher()
        entries = [self._entry(voucher, t, const.PURCHASE_TEXT.format(company=t.company, isin=t.isin),
                               t.net_amount, self.accounts.holdings)]

        if t.fee != 0:
            entries.append(self._entry(voucher, t, const.FEE_TEXT, -t.fee, self.accounts.fee))

        return entries

    def convert_dividend(self, t: Transaction) -> tuple[list[LedgerEntry], bool]:
        voucher = self.allocate_voucher()
        entries = [self._entry(voucher, t, const.DIVIDEND_TEXT.format(company=t.company, isin=t.isin),
                               t.net_amount, self.accounts.dividend)]

        following = self.peek()
        if following is None or following.transaction_type != TransactionType.DIVIDEND_TAX:
            return entries, False

        tax = self.advance()
        logger.debug(f"Pairing dividend tax {tax.net_amount} with dividend of {t.company} on voucher {voucher}")
        entries.append(self._entry(voucher, tax, const.DIVIDEND_TAX_TEXT.format(company=tax.company, isin=tax.isin),
                                   tax.net_amount, self.accounts.dividend_tax))
        return entries, True

    def convert_interest(self, t: Transaction) -> list[LedgerEntry]:
        voucher = self.allocate_voucher()
        return [self._entry(voucher, t, const.INTEREST_TEXT, t.net_amount, self.accounts.interest)]

    def _entry(self, voucher: int, t: Transaction, text: str, amount, balance_account: str) -> LedgerEntry:
        return LedgerEntry(
            voucher=voucher,
            date=t.date,
            text=text,
            account=self.accounts.broker,
            account_vat_type=self.accounts.vat_type,
            amount=amount,
            balance_account=balance_account,
            balance_account_vat_type=self.accounts.vat_type,
        )
