"""Demo data generators."""

from bank_ledger.generators.account import AccountGenerator, AccountSpec

__all__ = ["AccountGenerator", "AccountSpec"]
