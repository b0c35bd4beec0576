"""Demo account generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Account, AccountKind
from bank_ledger.store import Ledger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSpec:
    """Inputs for ``Ledger.create_account``."""

    number: str
    holder: str
    kind: AccountKind


class AccountGenerator(BaseGenerator):
    """Generate synthetic accounts for demos.

    Account kinds:
    - CURRENT: ~60%
    - SAVINGS: ~40%
    """

    ACCOUNT_KINDS = [AccountKind.CURRENT, AccountKind.SAVINGS]
    ACCOUNT_KIND_WEIGHTS = [0.60, 0.40]
    NUMBER_FORMAT = "AC########"

    def generate(self) -> AccountSpec:
        """Generate a single account spec with a number not handed out before.

        Returns
        -------
        AccountSpec
            Generated account inputs.
        """
        kind = self.rng.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
        return AccountSpec(
            number=self.fake.unique.bothify(self.NUMBER_FORMAT),
            holder=self.fake.name(),
            kind=kind,
        )

    def generate_batch(self, count: int) -> Iterator[AccountSpec]:
        """Generate multiple account specs.

        Parameters
        ----------
        count : int
            Number of accounts to generate.

        Yields
        ------
        AccountSpec
            Generated account inputs.
        """
        for _ in range(count):
            yield self.generate()

    def populate(
        self,
        ledger: Ledger,
        count: int,
        max_opening_deposit: int = 5000,
    ) -> list[Account]:
        """Create ``count`` accounts in ``ledger``, each with an opening deposit.

        Numbers already present in the ledger are skipped and regenerated.
        """
        created: list[Account] = []
        while len(created) < count:
            spec = self.generate()
            if spec.number in ledger:
                continue
            account = ledger.create_account(spec.number, spec.holder, spec.kind)
            opening = round(self.rng.uniform(1, max_opening_deposit), 2)
            ledger.deposit(account.number, opening)
            created.append(account)
        logger.info("Populated ledger with %d demo accounts", len(created))
        return created
