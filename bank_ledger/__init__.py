"""Checking account ledger: balances, statements and debt periods."""
