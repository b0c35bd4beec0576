"""Interactive command-line front end for the account ledger.

The menu mirrors the classic teller screen: create an account, deposit,
withdraw, transfer, list accounts, show history, apply savings interest
and exit. Nothing is saved; the ledger lives only as long as the process.
"""

import argparse
import logging
import sys
from typing import Callable

from bank_ledger.config import LOG_FORMATS, LOG_LEVELS, LedgerConfig
from bank_ledger.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    ConfigurationError,
    InsufficientFundsError,
    InterestNotSupportedError,
    InvalidAmountError,
    InvalidInputError,
    LedgerError,
)
from bank_ledger.generators import AccountGenerator
from bank_ledger.logging import setup_logging
from bank_ledger.models import AccountKind
from bank_ledger.sinks import ConsoleSink
from bank_ledger.store import Ledger, validate_amount

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]

ERROR_MESSAGES: dict[type[LedgerError], str] = {
    AccountNotFoundError: "Account Not Found!",
    AccountAlreadyExistsError: "Account already exists!",
    InsufficientFundsError: "Insufficient Balance!",
    InvalidAmountError: "Invalid amount!",
    InterestNotSupportedError: "Interest applies to Savings accounts only!",
    InvalidInputError: "Invalid input!",
}

EXIT_CHOICES = {"8", "exit", "quit", "q"}


def error_message(exc: LedgerError) -> str:
    """Map a ledger error to the message shown to the user."""
    for error_type in type(exc).__mro__:
        if error_type in ERROR_MESSAGES:
            return ERROR_MESSAGES[error_type]
    return str(exc)


def read_amount(prompt: Prompt, label: str) -> float:
    return validate_amount(prompt(label).strip())


def create_account(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    number = prompt("Enter Account Number: ")
    holder = prompt("Enter Account Holder Name: ")
    kinds = ", ".join(kind.value for kind in AccountKind)
    kind = prompt(f"Select Account Type ({kinds}) [{AccountKind.SAVINGS.value}]: ").strip()
    ledger.create_account(number, holder, kind or AccountKind.SAVINGS)
    sink.write_message("Account Created Successfully!")


def deposit(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    number = prompt("Enter Account Number: ").strip()
    ledger.get_account(number)
    amount = read_amount(prompt, "Enter Deposit Amount: ")
    balance = ledger.deposit(number, amount)
    sink.write_message(f"Deposit Successful! New Balance: {balance}")


def withdraw(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    number = prompt("Enter Account Number: ").strip()
    ledger.get_account(number)
    amount = read_amount(prompt, "Enter Withdrawal Amount: ")
    balance = ledger.withdraw(number, amount)
    sink.write_message(f"Withdrawal Successful! New Balance: {balance}")


def transfer(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    from_number = prompt("Enter Sender Account Number: ").strip()
    to_number = prompt("Enter Receiver Account Number: ").strip()
    amount = read_amount(prompt, "Enter Transfer Amount: ")
    try:
        ledger.transfer(from_number, to_number, amount)
    except AccountNotFoundError:
        sink.write_message("Invalid Account Number!")
        return
    sink.write_message("Transfer Successful!")


def list_accounts(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    sink.write_accounts(ledger.list_accounts())


def transaction_history(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    number = prompt("Enter Account Number: ").strip()
    sink.write_history(number, ledger.get_history(number))


def apply_interest(ledger: Ledger, sink: ConsoleSink, prompt: Prompt) -> None:
    number = prompt("Enter Account Number: ").strip()
    interest = ledger.apply_interest(number)
    balance = ledger.get_account(number).balance
    sink.write_message(f"Interest Applied! Interest: {interest}, New Balance: {balance}")


MENU: dict[str, tuple[str, Callable[[Ledger, ConsoleSink, Prompt], None]]] = {
    "1": ("Create Account", create_account),
    "2": ("Deposit", deposit),
    "3": ("Withdraw", withdraw),
    "4": ("Fund Transfer", transfer),
    "5": ("List Accounts", list_accounts),
    "6": ("Transaction History", transaction_history),
    "7": ("Apply Interest", apply_interest),
}


def print_menu(sink: ConsoleSink) -> None:
    sink.write_message("")
    for key, (label, _) in MENU.items():
        sink.write_message(f"{key}. {label}")
    sink.write_message("8. Exit")


def run_shell(ledger: Ledger, sink: ConsoleSink, prompt: Prompt = input) -> None:
    """Run the menu loop until the user exits or input ends.

    Ledger errors are reported and the loop continues.
    """
    while True:
        print_menu(sink)
        try:
            choice = prompt("Choose an option: ").strip().lower()
        except EOFError:
            break
        if choice in EXIT_CHOICES:
            break
        entry = MENU.get(choice)
        if entry is None:
            sink.write_message("Unknown option!")
            continue
        label, action = entry
        try:
            action(ledger, sink, prompt)
        except LedgerError as exc:
            logger.debug("%s failed: %s", label, exc)
            sink.write_message(error_message(exc))
        except EOFError:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-ledger",
        description="Manage in-memory bank accounts from the terminal",
    )
    parser.add_argument(
        "--demo",
        type=int,
        default=None,
        metavar="N",
        help="Pre-populate N generated demo accounts (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible demo accounts",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Faker locale for demo account holders (default: en_US)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print listings and histories as JSON",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the account listing and exit instead of starting the menu",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: standard)",
    )
    return parser


def load_config(args: argparse.Namespace) -> LedgerConfig:
    """Environment config with command-line flags layered on top."""
    config = LedgerConfig.from_env()
    if args.demo is not None:
        config.demo.num_accounts = args.demo
    if args.seed is not None:
        config.demo.seed = args.seed
    if args.locale is not None:
        config.demo.locale = args.locale
    if args.json:
        config.output.as_json = True
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if config.demo.num_accounts < 0:
        raise ConfigurationError("Number of demo accounts must not be negative")
    return config


def main(argv: list[str] | None = None, prompt: Prompt = input) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)

    ledger = Ledger()
    if config.demo.num_accounts:
        generator = AccountGenerator(seed=config.demo.seed, locale=config.demo.locale)
        generator.populate(ledger, config.demo.num_accounts, config.demo.max_opening_deposit)

    sink = ConsoleSink(as_json=config.output.as_json, pretty=config.output.pretty_json)
    if args.list:
        sink.write_accounts(ledger.list_accounts())
        return 0

    try:
        run_shell(ledger, sink, prompt)
    except KeyboardInterrupt:
        sink.write_message("")
    logger.info("Exiting with %d accounts; nothing is saved", len(ledger))
    return 0
