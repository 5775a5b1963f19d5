"""Ledger limits, storage keys and the tool catalog."""
