#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import os

# Project paths
# Use absolute path so the CLI and tests resolve the same default locations
import pathlib

from dotenv import load_dotenv


PROJECT_ROOT = pathlib.Path(__file__).parent.parent.absolute()

load_dotenv()

# Logging
LOG_FILE = os.getenv("NORDLEDGER_LOG_FILE", "nordledger.log")
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# App Version
VERSION = 0.3
AUTHOR = "sangelovich"
CONTRIBUTORS = "sangelovich"

# Default files for the convert command
INPUT_FILE = os.getenv("NORDLEDGER_INPUT", str(PROJECT_ROOT / "nordnet.csv"))
OUTPUT_FILE = os.getenv("NORDLEDGER_OUTPUT", str(PROJECT_ROOT / "output.csv"))

# Next unused voucher ("Bilag nr.") in the Dinero ledger, parsed by the --voucher option
NEXT_VOUCHER = os.getenv("NORDLEDGER_NEXT_VOUCHER", "1")

# DINERO ACCOUNT PLAN
# Every entry is booked against the broker cash account, the counter account
# depends on the kind of event.
BROKER_ACCOUNT = os.getenv("NORDLEDGER_BROKER_ACCOUNT", "55020")
HOLDINGS_ACCOUNT = os.getenv("NORDLEDGER_HOLDINGS_ACCOUNT", "51515")
FEE_ACCOUNT = os.getenv("NORDLEDGER_FEE_ACCOUNT", "7220")
DIVIDEND_ACCOUNT = os.getenv("NORDLEDGER_DIVIDEND_ACCOUNT", "9020")
DIVIDEND_TAX_ACCOUNT = os.getenv("NORDLEDGER_DIVIDEND_TAX_ACCOUNT", "54055")
INTEREST_ACCOUNT = os.getenv("NORDLEDGER_INTEREST_ACCOUNT", "9200")
VAT_TYPE = os.getenv("NORDLEDGER_VAT_TYPE", "Ingen moms")

# NORDNET EXPORT
# UTF-16LE, tab separated, newest transaction first
NORDNET_DELIMITER = "\t"
NORDNET_ENCODING = "utf-16-le"
NORDNET_DATE_FMT = "%Y-%m-%d"

# Transaktionstype codes
NORDNET_PURCHASE = "KØBT"
NORDNET_DIVIDEND = "UDB."
NORDNET_DIVIDEND_TAX = "UDBYTTESKAT"
NORDNET_INTEREST = "DEPOTRENTE"

# DINERO IMPORT FILE
DINERO_DELIMITER = ";"
DINERO_ENCODING = "utf-8"
DINERO_DATE_FMT = "%d/%m/%Y"
DINERO_COLUMNS = [
    "Bilag nr.",
    "Dato",
    "Tekst",
    "Konto",
    "Konto momstype",
    "Beløb",
    "Beløb udenlandsk valuta",
    "Modkonto",
    "Modkonto momstype",
]

# Entry descriptions
PURCHASE_TEXT = "Purchase of {company}, ISIN: {isin}"
FEE_TEXT = "Brokerage fee"
DIVIDEND_TEXT = "Dividend - {company}, ISIN: {isin}"
DIVIDEND_TAX_TEXT = "Dividend tax - {company}, ISIN: {isin}"
INTEREST_TEXT = "Broker interest"
