"""Weekledger - small-business ledger with Thursday-to-Sunday work weeks.

Records expenses, income and investments and aggregates them into totals,
work weeks, categories and months.
"""

__version__ = "0.1.0"
