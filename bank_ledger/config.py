"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


@dataclass
class DemoConfig:
    """Demo data configuration."""

    num_accounts: int = 0
    seed: int | None = None
    locale: str = "en_US"
    max_opening_deposit: int = 5000


@dataclass
class OutputConfig:
    """Console output configuration."""

    as_json: bool = False
    pretty_json: bool = True


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    demo: DemoConfig = field(default_factory=DemoConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        if self.demo.num_accounts < 0:
            raise ConfigurationError("Number of demo accounts must not be negative")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        demo = DemoConfig(
            num_accounts=_int_env("DEMO_ACCOUNTS", 0),
            seed=_int_env("SEED", None),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )

        output = OutputConfig(
            as_json=os.getenv("JSON_OUTPUT", "false").lower() == "true",
            pretty_json=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )

        return cls(
            demo=demo,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
