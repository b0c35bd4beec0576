"""Output sinks for presenting ledger data."""

from bank_ledger.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
