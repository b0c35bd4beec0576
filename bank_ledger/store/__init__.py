"""In-memory account store."""

from bank_ledger.store.ledger import Ledger, normalize_number, validate_amount

__all__ = ["Ledger", "normalize_number", "validate_amount"]
