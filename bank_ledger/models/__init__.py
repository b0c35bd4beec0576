"""Domain models for the account ledger."""

from bank_ledger.models.account import SAVINGS_INTEREST_RATE, Account, AccountSummary
from bank_ledger.models.enums import AccountKind

__all__ = ["SAVINGS_INTEREST_RATE", "Account", "AccountKind", "AccountSummary"]
