#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging

import pandas as pd

import constants as const
from brokers.basecsvprocessor import BaseCSVProcessor
from transaction import Transaction, TransactionType


# Module-level logger
logger = logging.getLogger(__name__)

# Nordnet export header -> internal column name
COLUMN_MAPPING = {
    "Bogføringsdag": "Date",
    "Værdipapirer": "Company",
    "ISIN": "ISIN",
    "Transaktionstype": "Type",
    "Transaktionstekst": "Text",
    "Antal": "Count",
    "Kurs": "Price",
    "Samlede afgifter": "Fee",
    "Beløb": "Total",
}


class NordnetTransactions(BaseCSVProcessor):
    def __init__(self, fname: str):
        super().__init__(BaseCSVProcessor.Table.TRANSACTIONS, fname,
                         delimiter=const.NORDNET_DELIMITER,
                         encoding=const.NORDNET_ENCODING,
                         date_format=const.NORDNET_DATE_FMT)

    def clean(self, df) -> pd.DataFrame:
        df = df.copy()

        self.cvs_req_cols(df, list(COLUMN_MAPPING.keys()))

        df = df.rename(columns=COLUMN_MAPPING)
        df = df[list(COLUMN_MAPPING.values())]

        # Drop fully blank lines some exports end with
        df = df[(df != "").any(axis=1)]

        if df.empty:
            logger.info("No transactions found in file")

        return df

    def transactions(self, oldest_first: bool = False) -> list[Transaction]:
        """
        Decode the export into Transaction values ordered oldest first.

        Nordnet writes the newest transaction first, so file order is reversed
        unless oldest_first says the file is already in chronological order.
        """
        df, start_date, end_date = self.process()

        items = [
            Transaction(
                date=row.Date,
                company=row.Company,
                isin=row.ISIN,
                transaction_type=TransactionType.from_code(row.Type),
                total=row.Total,
                fee=row.Fee,
                count=row.Count,
                price=row.Price,
                type_code=row.Type,
                text=row.Text,
            )
            for row in df.itertuples(index=False)
        ]

        if not oldest_first:
            items.reverse()

        logger.info(f"Decoded {len(items)} transactions from {self.file_path} ({start_date} to {end_date})")
        return items
