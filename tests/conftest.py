"""Pytest configuration and fixtures."""

import logging
from typing import Iterator

import pytest

from bank_classes.models.banking import BankAccount, BankCustomer


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_customer() -> BankCustomer:
    """Sample customer with an explicit id."""
    return BankCustomer("Ada", "Lovelace", "cust-test-001")


@pytest.fixture
def sample_account(sample_customer: BankCustomer) -> BankAccount:
    """Sample account opened with 1000."""
    return BankAccount(sample_customer, 1000)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo any setup_logging() changes made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("bank_classes").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("bank_classes").setLevel(package_level)
