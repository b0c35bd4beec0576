"""Pytest configuration and fixtures."""

import logging
import os
from datetime import datetime
from typing import Callable
from unittest.mock import patch

import pytest

from bank_ledger.store import Ledger

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 0)

LEDGER_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "DEMO_ACCOUNTS",
    "SEED",
    "FAKER_LOCALE",
    "JSON_OUTPUT",
    "PRETTY_JSON",
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns the same instant."""
    return lambda: FIXED_TIME


@pytest.fixture
def ledger(fixed_clock: Callable[[], datetime]) -> Ledger:
    """Create a fresh ledger for each test."""
    return Ledger(clock=fixed_clock)


@pytest.fixture
def alice(ledger: Ledger):
    """Savings account A1 for Alice with 100 deposited."""
    account = ledger.create_account("A1", "Alice", "Savings")
    ledger.deposit("A1", 100)
    return account


@pytest.fixture
def bob(ledger: Ledger):
    """Empty current account B1 for Bob."""
    return ledger.create_account("B1", "Bob", "Current")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put root logger handlers back after tests that reconfigure logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_env():
    """Environment without any bank-ledger variables."""
    env = {k: v for k, v in os.environ.items() if k not in LEDGER_ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield
