#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import sys
import os
# Add src to path for imports (needed when running test file directly)
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import unittest
from datetime import date
from decimal import Decimal

from transaction import Transaction, TransactionType


class TestTransactionType(unittest.TestCase):
    def test_known_codes(self):
        self.assertEqual(TransactionType.from_code("KØBT"), TransactionType.PURCHASE)
        self.assertEqual(TransactionType.from_code("UDB."), TransactionType.DIVIDEND)
        self.assertEqual(TransactionType.from_code("UDBYTTESKAT"), TransactionType.DIVIDEND_TAX)
        self.assertEqual(TransactionType.from_code("DEPOTRENTE"), TransactionType.INTEREST)

    def test_whitespace_and_case(self):
        self.assertEqual(TransactionType.from_code("  købt "), TransactionType.PURCHASE)
        self.assertEqual(TransactionType.from_code("Udb."), TransactionType.DIVIDEND)

    def test_unknown_codes(self):
        self.assertEqual(TransactionType.from_code("INDBETALING"), TransactionType.OTHER)
        self.assertEqual(TransactionType.from_code("SOLGT"), TransactionType.OTHER)
        self.assertEqual(TransactionType.from_code(""), TransactionType.OTHER)
        self.assertEqual(TransactionType.from_code("OTHER"), TransactionType.OTHER)


class TestTransaction(unittest.TestCase):
    def test_net_amount(self):
        t = Transaction(date(2024, 1, 2), "X", "DK1", TransactionType.PURCHASE,
                        Decimal("-1000.00"), Decimal("-15.00"))
        self.assertEqual(t.net_amount, Decimal("-1015.00"))

    def test_defaults(self):
        t = Transaction(date(2024, 1, 2), "", "", TransactionType.INTEREST, Decimal("1"), Decimal("0"))
        self.assertEqual(t.count, Decimal("0"))
        self.assertEqual(t.price, Decimal("0"))
        self.assertEqual(t.type_code, "")

    def test_immutable(self):
        t = Transaction(date(2024, 1, 2), "X", "DK1", TransactionType.INTEREST, Decimal("1"), Decimal("0"))
        with self.assertRaises(AttributeError):
            t.total = Decimal("2")


if __name__ == '__main__':
    unittest.main()
