"""Banking domain models."""

from bank_classes.models.banking.account import BankAccount, to_amount
from bank_classes.models.banking.customer import (
    DEFAULT_CUSTOMER_ID,
    DEFAULT_FIRST_NAME,
    DEFAULT_LAST_NAME,
    BankCustomer,
)

__all__ = [
    "BankAccount",
    "BankCustomer",
    "DEFAULT_CUSTOMER_ID",
    "DEFAULT_FIRST_NAME",
    "DEFAULT_LAST_NAME",
    "to_amount",
]
