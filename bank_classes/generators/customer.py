"""Customer generator for banking domain."""

from __future__ import annotations

from typing import Iterator

from bank_classes.generators.base import BaseGenerator
from bank_classes.models.banking import BankCustomer


class CustomerGenerator(BaseGenerator):
    """Generate sample bank customers."""

    # Ten digits, same shape as the default identifier
    CUSTOMER_ID_FORMAT = "%#########"

    def generate(self) -> BankCustomer:
        """Generate a single customer.

        Returns
        -------
        BankCustomer
            Generated customer.
        """
        return BankCustomer(
            self.fake.first_name(),
            self.fake.last_name(),
            self.fake.numerify(self.CUSTOMER_ID_FORMAT),
        )

    def generate_batch(self, count: int) -> Iterator[BankCustomer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        BankCustomer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
