"""Account model for the ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from bank_ledger.exceptions import InterestNotSupportedError
from bank_ledger.models.enums import AccountKind

SAVINGS_INTEREST_RATE = 0.04


@dataclass
class Account:
    """Bank account held in the ledger.

    The two account kinds share one record type:
    - SAVINGS: carries ``interest_rate`` and supports ``apply_interest``
    - CURRENT: plain deposit/withdraw account, ``interest_rate`` is None

    ``number`` is the ledger key and cannot be reassigned once set.
    """

    number: str
    holder: str
    kind: AccountKind
    balance: float = 0.0
    interest_rate: float | None = None
    transaction_history: list[str] = field(default_factory=list)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "number" and "number" in self.__dict__:
            raise AttributeError(f"Account number {self.number} cannot be changed")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        self.kind = AccountKind.parse(self.kind)
        if self.kind == AccountKind.SAVINGS and self.interest_rate is None:
            self.interest_rate = SAVINGS_INTEREST_RATE

    @property
    def account_type(self) -> str:
        """Display name of the account kind."""
        return self.kind.value

    def get_account_type(self) -> str:
        return self.account_type

    @property
    def history(self) -> tuple[str, ...]:
        """Transaction history, oldest first."""
        return tuple(self.transaction_history)

    def deposit(self, amount: float) -> None:
        """Credit ``amount`` and record it. Amount is not validated here."""
        amount = float(amount)
        self.balance += amount
        self._record("Deposited", amount)

    def withdraw(self, amount: float) -> bool:
        """Debit ``amount`` if the balance covers it.

        Returns
        -------
        bool
            True if the withdrawal happened, False if funds were
            insufficient (balance and history untouched).
        """
        amount = float(amount)
        if not amount <= self.balance:
            return False
        self.balance -= amount
        self._record("Withdrawn", amount)
        return True

    def apply_interest(self) -> float:
        """Credit one period of interest on a savings account.

        Returns
        -------
        float
            The interest credited.

        Raises
        ------
        InterestNotSupportedError
            If the account is not a savings account.
        """
        if self.kind != AccountKind.SAVINGS or self.interest_rate is None:
            raise InterestNotSupportedError(
                f"Account {self.number} is a {self.account_type} account"
            )
        interest = self.balance * self.interest_rate
        self.deposit(interest)
        return interest

    def _record(self, action: str, amount: float) -> None:
        self.transaction_history.append(f"{self.clock().isoformat()} - {action}: {amount}")


@dataclass(frozen=True)
class AccountSummary:
    """Read-only listing row for an account."""

    number: str
    holder: str
    account_type: str
    balance: float

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            number=account.number,
            holder=account.holder,
            account_type=account.account_type,
            balance=account.balance,
        )
