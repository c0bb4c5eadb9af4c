"""Configuration management for bank-classes."""

import os
from dataclasses import dataclass, field
from decimal import Decimal

from bank_classes.exceptions import ConfigurationError, InvalidAmountError
from bank_classes.models.banking.account import to_amount
from bank_classes.models.banking.customer import DEFAULT_FIRST_NAME, DEFAULT_LAST_NAME


@dataclass
class ScenarioConfig:
    """Inputs of the deposit/withdraw demonstration."""

    first_name: str = DEFAULT_FIRST_NAME
    last_name: str = DEFAULT_LAST_NAME
    customer_id: str | None = None  # None uses the customer's default id
    opening_balance: Decimal = Decimal("1000")
    deposit: Decimal = Decimal("500")
    withdrawal: Decimal = Decimal("200")


@dataclass
class BankConfig:
    """Main configuration for bank-classes."""

    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        defaults = ScenarioConfig()

        scenario = ScenarioConfig(
            first_name=os.getenv("BANK_FIRST_NAME", defaults.first_name),
            last_name=os.getenv("BANK_LAST_NAME", defaults.last_name),
            customer_id=os.getenv("BANK_CUSTOMER_ID"),
            opening_balance=_env_amount("BANK_OPENING_BALANCE", defaults.opening_balance),
            deposit=_env_amount("BANK_DEPOSIT", defaults.deposit),
            withdrawal=_env_amount("BANK_WITHDRAWAL", defaults.withdrawal),
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            scenario=scenario,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )


def _env_amount(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return to_amount(raw)
    except InvalidAmountError as e:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from e
