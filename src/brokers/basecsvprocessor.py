#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import io
import logging
import os
from collections.abc import Callable
from datetime import date, datetime
from decimal import InvalidOperation
from enum import Enum

import pandas as pd

import constants as const
import util
from errors import DecodeError


# Module-level logger
logger = logging.getLogger(__name__)


class BaseCSVProcessor:

    class Table(Enum):
        TRANSACTIONS = (1, ["Date", "Company", "ISIN", "Type", "Text", "Count", "Price", "Fee", "Total"])

        def __init__(self, value, required_columns):
            self._value_ = value  # Assign the actual enum value
            self.required_columns = required_columns

    # Columns converted to Decimal by validate()
    decimal_columns = ["Count", "Price", "Fee", "Total"]

    def __init__(self, table: Table, fname: str, delimiter: str = ",", encoding: str = "utf-8", date_format: str = const.NORDNET_DATE_FMT):
        self.table = table
        self.file_path = fname
        self.delimiter = delimiter
        self.encoding = encoding
        self.date_format = date_format
        self.debug = False

    def set_debug(self, debug: bool):
        self.debug = debug

    def read_text(self) -> str:
        try:
            with open(self.file_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.error(f"Unable to read {self.file_path}: {e}")
            raise DecodeError(f"Unable to read {self.file_path}: {e}") from e

        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Unable to decode {self.file_path} as {self.encoding}: {e}")
            raise DecodeError(f"File is not valid {self.encoding}: {self.file_path}") from e

        # Optional byte order mark
        return text.removeprefix("\ufeff")

    def read_csv(self) -> pd.DataFrame:
        text = self.read_text()
        if not text.strip():
            raise DecodeError(f"File is empty: {self.file_path}")

        try:
            df = pd.read_csv(io.StringIO(text), sep=self.delimiter, dtype=str, keep_default_na=False, engine="python")
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            logger.error(f"Unable to parse {self.file_path}: {e}")
            raise DecodeError(f"Malformed file {self.file_path}: {e}") from e
        return df

    def cvs_req_cols(self, df, required_cols: list[str]):
        if not all(col in df.columns for col in required_cols):
            missing = [col for col in required_cols if col not in df.columns]
            logger.error(f"Missing required columns: {missing}. Found columns: {list(df.columns)}")
            raise DecodeError(f"Missing required columns: {missing}")

    def clean(self, df) -> pd.DataFrame:
        return df

    def set_columns(self, df) -> pd.DataFrame:
        df = df[self.table.required_columns]
        return df

    def convert_column(self, df: pd.DataFrame, col: str, func: Callable, errors: tuple) -> pd.Series:
        values = []
        for row, value in zip(df.index, df[col]):
            try:
                values.append(func(value))
            except errors as e:
                # +2: header line plus 1-based numbering
                logger.error(f"Unable to parse '{value}' in column '{col}': {e}")
                raise DecodeError(f"Invalid value '{value}'", row=row + 2, column=col) from e
        return pd.Series(values, index=df.index, dtype=object)

    def validate(self, df) -> pd.DataFrame:
        logger.debug(f"Validating {len(df)} rows with columns: {list(df.columns)}")
        df = df.copy()

        df["Date"] = self.convert_column(df, "Date", lambda s: datetime.strptime(s, self.date_format).date(), (ValueError,))

        for col in self.decimal_columns:
            if col in df.columns:
                df[col] = self.convert_column(df, col, util.nordnet_to_decimal, (InvalidOperation, ValueError))

        return df

    def process(self) -> tuple[pd.DataFrame, date | None, date | None]:
        basename = os.path.basename(self.file_path)
        basename, _ = os.path.splitext(basename)

        logger.info(f"Processing CSV file: {self.file_path}")

        # Load the csv
        df = self.read_csv()
        logger.debug(f"Loaded {len(df)} rows with {len(df.columns)} columns")
        if self.debug:
            df.to_csv(f"{basename}_load.csv", index=False)

        # Trim whitespace, headers included
        df.columns = [str(col).strip() for col in df.columns]
        for col in df.columns:
            df[col] = df[col].astype(str).str.strip()

        # Cleanup the dataframe
        df = self.clean(df)
        if self.debug:
            df.to_csv(f"{basename}_clean.csv", index=False)

        # Set the required columns
        df = self.set_columns(df)
        logger.debug(f"Set columns to required: {list(df.columns)}")

        # If DataFrame is empty after cleaning, return early
        if df.empty:
            logger.info("No transactions to process after cleaning")
            return df, None, None

        # Validate and convert to typed values
        df = self.validate(df)
        logger.debug("Validation passed")

        start_date = df["Date"].min()
        end_date = df["Date"].max()
        logger.info(f"Processed {len(df)} rows from {start_date} to {end_date}")
        return df, start_date, end_date
