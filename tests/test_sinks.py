"""Tests for ConsoleSink."""

import json

import pytest

from bank_ledger.models import AccountSummary
from bank_ledger.sinks.console import ConsoleSink

SUMMARIES = [
    AccountSummary(number="A1", holder="Alice", account_type="Savings", balance=50.0),
    AccountSummary(number="B1", holder="Bob", account_type="Current", balance=0.0),
]


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.as_json is False
        assert sink.pretty is True

    def test_write_accounts_text(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink().write_accounts(SUMMARIES)

        assert capsys.readouterr().out.splitlines() == [
            "Accounts:",
            "Account Number: A1, Holder: Alice, Type: Savings, Balance: 50.0",
            "Account Number: B1, Holder: Bob, Type: Current, Balance: 0.0",
        ]

    def test_write_accounts_empty(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink().write_accounts([])
        assert capsys.readouterr().out == "Accounts:\n"

    def test_write_accounts_json(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(as_json=True, pretty=False).write_accounts(SUMMARIES)

        data = json.loads(capsys.readouterr().out)
        assert data["accounts"][0] == {
            "number": "A1",
            "holder": "Alice",
            "account_type": "Savings",
            "balance": 50.0,
        }
        assert len(data["accounts"]) == 2

    def test_write_history_text(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink().write_history("A1", ["t1 - Deposited: 100.0", "t2 - Withdrawn: 20.0"])

        assert capsys.readouterr().out.splitlines() == [
            "Transaction History:",
            "t1 - Deposited: 100.0",
            "t2 - Withdrawn: 20.0",
        ]

    def test_write_history_json(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(as_json=True).write_history("A1", ["t1 - Deposited: 100.0"])

        data = json.loads(capsys.readouterr().out)
        assert data == {"history": [{"number": "A1", "entry": "t1 - Deposited: 100.0"}]}

    def test_pretty_json_is_indented(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(as_json=True, pretty=True).write_batch("accounts", SUMMARIES[:1])

        out = capsys.readouterr().out
        assert "\n  " in out
        assert json.loads(out)["accounts"][0]["holder"] == "Alice"

    def test_write_message(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink().write_message("Transfer Successful!")
        assert capsys.readouterr().out == "Transfer Successful!\n"
