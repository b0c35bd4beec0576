"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class AccountNotFoundError(LedgerError):
    """Raised when an account number is not in the ledger."""


class AccountAlreadyExistsError(LedgerError):
    """Raised when creating an account under a number already in use."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the account balance."""


class InvalidInputError(LedgerError):
    """Raised when an operation receives malformed input."""


class InvalidAmountError(InvalidInputError):
    """Raised when an amount is not a finite positive number."""


class InterestNotSupportedError(LedgerError):
    """Raised when interest is applied to a non-savings account."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
