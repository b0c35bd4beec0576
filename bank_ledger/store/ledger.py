"""In-memory account ledger."""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from bank_ledger.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidInputError,
)
from bank_ledger.models import Account, AccountKind, AccountSummary

logger = logging.getLogger(__name__)


def validate_amount(amount: float) -> float:
    """Return ``amount`` as a float, rejecting non-finite or non-positive values."""
    try:
        value = float(amount)
    except (TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount!r}")
    return value


def normalize_number(number: str | None) -> str:
    """Canonical ledger key for an account number (surrounding whitespace dropped)."""
    return (number or "").strip()


@dataclass
class Ledger:
    """In-memory store owning every account, keyed by account number."""

    _accounts: dict[str, Account] = field(default_factory=dict, init=False, repr=False)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and normalize_number(number) in self._accounts

    def create_account(self, number: str, holder: str, kind: AccountKind | str) -> Account:
        """Open a new account with a zero balance.

        Parameters
        ----------
        number : str
            Unique account number.
        holder : str
            Account holder name.
        kind : AccountKind | str
            ``AccountKind`` member or its display name ("Savings"/"Current").

        Returns
        -------
        Account
            The newly created account.

        Raises
        ------
        AccountAlreadyExistsError
            If ``number`` is already in use.
        InvalidInputError
            If ``number`` or ``holder`` is blank or ``kind`` is unknown.
        """
        number = normalize_number(number)
        holder = (holder or "").strip()
        if not number:
            raise InvalidInputError("Account number must not be empty")
        if not holder:
            raise InvalidInputError("Account holder must not be empty")
        account_kind = AccountKind.parse(kind)

        if number in self._accounts:
            logger.warning("Rejected duplicate account number %s", number)
            raise AccountAlreadyExistsError(f"Account {number} already exists")

        account = Account(number=number, holder=holder, kind=account_kind, clock=self.clock)
        self._accounts[number] = account
        logger.info("Created %s account %s for %s", account.account_type, number, holder)
        return account

    def get_account(self, number: str) -> Account:
        """Look up an account, raising ``AccountNotFoundError`` if absent."""
        account = self._accounts.get(normalize_number(number))
        if account is None:
            raise AccountNotFoundError(f"Account {number} not found")
        return account

    def deposit(self, number: str, amount: float) -> float:
        """Credit an account and return its new balance."""
        account = self.get_account(number)
        value = validate_amount(amount)
        account.deposit(value)
        logger.info("Deposited %s into %s (balance %s)", value, number, account.balance)
        return account.balance

    def withdraw(self, number: str, amount: float) -> float:
        """Debit an account and return its new balance."""
        account = self.get_account(number)
        value = validate_amount(amount)
        if not account.withdraw(value):
            logger.warning(
                "Withdrawal of %s from %s refused (balance %s)", value, number, account.balance
            )
            raise InsufficientFundsError(
                f"Account {number} has insufficient funds for {value}"
            )
        logger.info("Withdrew %s from %s (balance %s)", value, number, account.balance)
        return account.balance

    def transfer(self, from_number: str, to_number: str, amount: float) -> tuple[float, float]:
        """Move funds between two accounts.

        The sender is debited before the receiver is credited, so a refused
        debit leaves both accounts untouched.

        Returns
        -------
        tuple[float, float]
            Sender and receiver balances after the transfer.

        Raises
        ------
        AccountNotFoundError
            If either account is missing.
        InsufficientFundsError
            If the sender cannot cover ``amount``.
        """
        sender = self.get_account(from_number)
        receiver = self.get_account(to_number)
        value = validate_amount(amount)

        if not sender.withdraw(value):
            logger.warning(
                "Transfer of %s from %s to %s refused (balance %s)",
                value,
                from_number,
                to_number,
                sender.balance,
            )
            raise InsufficientFundsError(
                f"Account {from_number} has insufficient funds for {value}"
            )
        receiver.deposit(value)
        logger.info("Transferred %s from %s to %s", value, from_number, to_number)
        return sender.balance, receiver.balance

    def apply_interest(self, number: str) -> float:
        """Credit savings interest on an account and return the amount credited."""
        account = self.get_account(number)
        interest = account.apply_interest()
        logger.info("Applied interest of %s to %s", interest, number)
        return interest

    def list_accounts(self) -> list[AccountSummary]:
        """Summaries of all accounts in insertion order."""
        return [AccountSummary.from_account(account) for account in self._accounts.values()]

    def get_history(self, number: str) -> list[str]:
        """Copy of an account's transaction history, oldest first."""
        return list(self.get_account(number).history)

    def summary(self) -> dict[str, int | float]:
        """Return account counts per kind and the total balance held."""
        counts = {kind.value: 0 for kind in AccountKind}
        for account in self._accounts.values():
            counts[account.account_type] += 1
        return {
            "accounts": len(self._accounts),
            **counts,
            "total_balance": sum(account.balance for account in self._accounts.values()),
        }
