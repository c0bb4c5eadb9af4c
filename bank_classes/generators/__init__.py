"""Sample data generators for the banking models."""

from bank_classes.generators.account import AccountGenerator
from bank_classes.generators.customer import CustomerGenerator

__all__ = ["AccountGenerator", "CustomerGenerator"]
