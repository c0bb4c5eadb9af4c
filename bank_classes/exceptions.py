"""Custom exception hierarchy for bank-classes."""


class BankClassesError(Exception):
    """Base exception for all bank-classes errors."""


class ConfigurationError(BankClassesError):
    """Raised when configuration is invalid or missing."""


class InvalidAmountError(BankClassesError, ValueError):
    """Raised when a monetary amount cannot be parsed as a decimal."""
