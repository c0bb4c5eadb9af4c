"""Deposit/withdraw demonstration for a single customer account."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from bank_classes.config import BankConfig, ScenarioConfig
from bank_classes.exceptions import ConfigurationError
from bank_classes.generators import CustomerGenerator
from bank_classes.logging import get_logger, setup_logging
from bank_classes.models.banking import BankAccount, BankCustomer, to_amount
from bank_classes.sinks import ConsoleSink

logger = get_logger(__name__)


@dataclass
class DemoResult:
    """Outcome of one demo run."""

    customer: BankCustomer
    account: BankAccount
    lines: list[str] = field(default_factory=list)


def format_summary(customer: BankCustomer, account: BankAccount) -> list[str]:
    """Render the customer name and account balance lines.

    The balance is printed in plain decimal notation, never as an exponent.
    """
    return [
        f"Customer: {customer.first_name} {customer.last_name}",
        f"Balance: {account.balance:f}",
    ]


def build_customer(scenario: ScenarioConfig) -> BankCustomer:
    """Build the scenario customer, falling back to the default id when none is set."""
    if scenario.customer_id is None:
        return BankCustomer(scenario.first_name, scenario.last_name)
    return BankCustomer(scenario.first_name, scenario.last_name, scenario.customer_id)


def run_demo(
    config: BankConfig | None = None,
    customer: BankCustomer | None = None,
) -> DemoResult:
    """Open an account, deposit, withdraw and summarize.

    Parameters
    ----------
    config : BankConfig | None
        Scenario inputs. Defaults reproduce the classroom example:
        Tim Shao opens with 1000, deposits 500, withdraws 200.
    customer : BankCustomer | None
        Use this customer instead of building one from ``config``.

    Returns
    -------
    DemoResult
        The customer, the account and the two summary lines.
    """
    config = config or BankConfig()
    scenario = config.scenario
    customer = customer or build_customer(scenario)

    account = BankAccount(customer, scenario.opening_balance)
    logger.info("Opened account for %s with %s", customer.full_name, account.balance)

    account.deposit(scenario.deposit)
    account.withdraw(scenario.withdrawal)

    return DemoResult(customer=customer, account=account, lines=format_summary(customer, account))


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser for the demo."""
    parser = argparse.ArgumentParser(
        description="Open a bank account, deposit, withdraw and print the balance.",
    )
    parser.add_argument("--first-name", help="Customer first name")
    parser.add_argument("--last-name", help="Customer last name")
    parser.add_argument("--customer-id", help="Customer identifier")
    parser.add_argument("--opening-balance", type=to_amount, help="Opening balance")
    parser.add_argument("--deposit", type=to_amount, help="Amount to deposit")
    parser.add_argument("--withdrawal", type=to_amount, help="Amount to withdraw")
    parser.add_argument(
        "--random-customer",
        action="store_true",
        help="Use a generated customer instead of the configured one",
    )
    parser.add_argument("--seed", type=int, help="Seed for --random-customer")
    parser.add_argument("--json", action="store_true", help="Also print the account as JSON")
    parser.add_argument("--log-level", help="Log level (default: WARNING)")
    parser.add_argument("--log-format", choices=["standard", "json"], help="Log format")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo from the command line.

    Flags override values read from the environment.
    """
    args = build_parser().parse_args(argv)

    try:
        config = BankConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    scenario = config.scenario
    for name in ("first_name", "last_name", "customer_id", "opening_balance", "deposit", "withdrawal"):
        value = getattr(args, name)
        if value is not None:
            setattr(scenario, name, value)
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    if args.seed is not None:
        config.seed = args.seed

    setup_logging(config.log_level, config.log_format)

    customer = None
    if args.random_customer:
        customer = CustomerGenerator(seed=config.seed).generate()

    result = run_demo(config, customer=customer)

    sink = ConsoleSink(pretty=True)
    sink.write_lines(result.lines)
    if args.json:
        sink.write_batch("account", [result.account])
    return 0
