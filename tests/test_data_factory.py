"""
Test Data Factory

Utility class for creating Nordnet transactions and Nordnet export files for
converter, decoder and CLI tests.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from transaction import Transaction, TransactionType


NORDNET_HEADER = [
    "Id", "Bogføringsdag", "Handelsdag", "Valørdag", "Depot", "Transaktionstype",
    "Værdipapirer", "ISIN", "Antal", "Kurs", "Rente", "Samlede afgifter", "Beløb",
    "Valuta", "Transaktionstekst",
]


class TestDataFactory:
    """Factory for creating test transactions and export files"""

    def __init__(self, company: str = "Novo Nordisk B", isin: str = "DK0062498333", day: Optional[date] = None):
        """
        Initialize test data factory

        Args:
            company: Default company name
            isin: Default ISIN
            day: Default transaction date
        """
        self.company = company
        self.isin = isin
        self.day = day or date(2024, 3, 15)

    def create(self, transaction_type: TransactionType, total: str, fee: str = "0",
               company: Optional[str] = None, isin: Optional[str] = None,
               day: Optional[date] = None, type_code: Optional[str] = None) -> Transaction:
        if type_code is None:
            type_code = transaction_type.value
        return Transaction(
            date=day or self.day,
            company=self.company if company is None else company,
            isin=self.isin if isin is None else isin,
            transaction_type=transaction_type,
            total=Decimal(total),
            fee=Decimal(fee),
            type_code=type_code,
        )

    def purchase(self, total: str = "-1000.00", fee: str = "-15.00", **kwargs) -> Transaction:
        return self.create(TransactionType.PURCHASE, total, fee, **kwargs)

    def dividend(self, total: str = "100.00", fee: str = "0", **kwargs) -> Transaction:
        return self.create(TransactionType.DIVIDEND, total, fee, **kwargs)

    def dividend_tax(self, total: str = "-15.00", fee: str = "0", **kwargs) -> Transaction:
        return self.create(TransactionType.DIVIDEND_TAX, total, fee, **kwargs)

    def interest(self, total: str = "2.50", fee: str = "0", **kwargs) -> Transaction:
        return self.create(TransactionType.INTEREST, total, fee, **kwargs)

    def other(self, total: str = "5000.00", type_code: str = "INDBETALING", **kwargs) -> Transaction:
        return self.create(TransactionType.OTHER, total, "0", type_code=type_code, **kwargs)


def nordnet_row(day: str, type_code: str, company: str = "", isin: str = "", count: str = "",
                price: str = "", fee: str = "", total: str = "", text: str = "") -> list[str]:
    """One export line in NORDNET_HEADER column order."""
    return ["1", day, day, day, "12345678", type_code, company, isin, count, price, "",
            fee, total, "DKK", text]


def write_nordnet_file(path: str, rows: list[list[str]], bom: bool = True,
                       header: Optional[list[str]] = None) -> str:
    """Write rows as a UTF-16LE, tab separated Nordnet export."""
    lines = ["\t".join(header or NORDNET_HEADER)]
    lines.extend("\t".join(row) for row in rows)
    text = "\r\n".join(lines) + "\r\n"

    data = text.encode("utf-16-le")
    if bom:
        data = b"\xff\xfe" + data

    with open(path, "wb") as f:
        f.write(data)
    return path
