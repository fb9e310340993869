#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

import constants as const


class TransactionType(Enum):
    """Kinds of Nordnet transactions the converter knows about"""
    PURCHASE = const.NORDNET_PURCHASE
    DIVIDEND = const.NORDNET_DIVIDEND
    DIVIDEND_TAX = const.NORDNET_DIVIDEND_TAX
    INTEREST = const.NORDNET_INTEREST
    OTHER = "OTHER"

    @classmethod
    def from_code(cls, code: str) -> "TransactionType":
        """Map a Transaktionstype code ('KØBT', 'UDB.', ...) to a type. Unknown codes are OTHER."""
        code = code.strip().upper()
        for member in cls:
            if member is not cls.OTHER and member.value == code:
                return member
        return cls.OTHER


class Transaction(NamedTuple):
    """One row of the Nordnet export, already decoded."""
    date: date
    company: str
    isin: str
    transaction_type: TransactionType
    total: Decimal
    fee: Decimal
    count: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    type_code: str = ""
    text: str = ""

    @property
    def net_amount(self) -> Decimal:
        # fee carries its own sign, typically negative
        return self.total + self.fee
