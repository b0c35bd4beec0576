"""Console sink for ledger listings, histories and messages."""

import json
from typing import Any

from bank_ledger.models import AccountSummary
from bank_ledger.sinks.serialization import to_dict


class ConsoleSink:
    """Output ledger data to console (stdout)."""

    def __init__(self, as_json: bool = False, pretty: bool = True) -> None:
        """Initialize console sink.

        Parameters
        ----------
        as_json : bool
            Print listings as JSON records instead of text lines.
        pretty : bool
            Pretty-print JSON output.
        """
        self.as_json = as_json
        self.pretty = pretty

    def write_accounts(self, summaries: list[AccountSummary]) -> None:
        """Print the account listing."""
        if self.as_json:
            self.write_batch("accounts", summaries)
            return
        print("Accounts:")
        for summary in summaries:
            print(
                f"Account Number: {summary.number}, Holder: {summary.holder}, "
                f"Type: {summary.account_type}, Balance: {summary.balance}"
            )

    def write_history(self, number: str, entries: list[str]) -> None:
        """Print one account's transaction history."""
        if self.as_json:
            self.write_batch("history", [{"number": number, "entry": entry} for entry in entries])
            return
        print("Transaction History:")
        for entry in entries:
            print(entry)

    def write_message(self, message: str) -> None:
        """Print a single user-facing message."""
        print(message)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console as JSON."""
        data = [to_dict(record) for record in records]
        if self.pretty:
            print(json.dumps({entity_type: data}, indent=2, ensure_ascii=False, default=str))
        else:
            print(json.dumps({entity_type: data}, ensure_ascii=False, default=str))
