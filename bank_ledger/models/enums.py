"""Enumeration types for ledger entities."""

from enum import Enum

from bank_ledger.exceptions import InvalidInputError


class AccountKind(str, Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"

    @classmethod
    def parse(cls, value: "AccountKind | str") -> "AccountKind":
        """Resolve a kind from an enum member or its display name.

        Matching is case-insensitive and accepts the member name as well,
        so ``"savings"``, ``"SAVINGS"`` and ``AccountKind.SAVINGS`` are
        equivalent.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for kind in cls:
            if text in (kind.value.lower(), kind.name.lower()):
                return kind
        raise InvalidInputError(f"Unknown account type: {value!r}")
