"""Terminal budget ledger with CSV-backed accounts, an in-memory library manager, and small helpers."""

__version__ = "0.1.0"