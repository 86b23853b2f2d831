"""
Personal Ledger - Source Package

A single-account ledger: balance, dated deposits and withdrawals,
history queries by day, month and year, and save/load of the history.

DESIGN PRINCIPLES:
1. The ledger is the only thing that changes the balance
2. Failed operations report, they never crash the caller
3. Storage and the clock are swappable
"""

__version__ = "1.0.0"
__author__ = "Personal Ledger Team"
