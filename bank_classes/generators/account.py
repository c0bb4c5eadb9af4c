"""Account generator for banking domain."""

from decimal import Decimal

from bank_classes.generators.base import BaseGenerator
from bank_classes.models.banking import BankAccount, BankCustomer


class AccountGenerator(BaseGenerator):
    """Generate sample bank accounts for existing customers."""

    MIN_OPENING_BALANCE = 0
    MAX_OPENING_BALANCE = 10000

    def generate(self, customer: BankCustomer) -> BankAccount:
        """Open an account for ``customer`` with a random opening balance."""
        cents = self.rng.randint(self.MIN_OPENING_BALANCE * 100, self.MAX_OPENING_BALANCE * 100)
        balance = (Decimal(cents) / 100).quantize(Decimal("0.01"))
        return BankAccount(customer, balance)
