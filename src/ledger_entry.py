#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

from datetime import date
from decimal import Decimal
from typing import NamedTuple

import constants as const


class AccountPlan(NamedTuple):
    """Dinero account codes used when booking Nordnet events."""
    broker: str
    holdings: str
    fee: str
    dividend: str
    dividend_tax: str
    interest: str
    vat_type: str

    @classmethod
    def default(cls) -> "AccountPlan":
        return cls(
            broker=const.BROKER_ACCOUNT,
            holdings=const.HOLDINGS_ACCOUNT,
            fee=const.FEE_ACCOUNT,
            dividend=const.DIVIDEND_ACCOUNT,
            dividend_tax=const.DIVIDEND_TAX_ACCOUNT,
            interest=const.INTEREST_ACCOUNT,
            vat_type=const.VAT_TYPE,
        )


class LedgerEntry(NamedTuple):
    """One Dinero ledger line. Entries of one event share a voucher number."""
    voucher: int
    date: date
    text: str
    account: str
    account_vat_type: str
    amount: Decimal
    balance_account: str
    balance_account_vat_type: str
    foreign_amount: Decimal = Decimal("0")
