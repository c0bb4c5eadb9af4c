"""Account model for banking domain."""

from decimal import Decimal, InvalidOperation

from bank_classes.exceptions import InvalidAmountError
from bank_classes.logging import get_logger
from bank_classes.models.banking.customer import BankCustomer

logger = get_logger(__name__)

Amount = Decimal | int | float | str


def to_amount(value: Amount) -> Decimal:
    """Convert a monetary value to ``Decimal`` without binary rounding.

    Parameters
    ----------
    value : Decimal | int | float | str
        Amount to convert. Floats go through ``str()`` so ``0.1`` becomes
        ``Decimal("0.1")``.

    Returns
    -------
    Decimal
        The exact decimal amount.

    Raises
    ------
    TypeError
        If ``value`` is not a numeric or string type.
    InvalidAmountError
        If a string cannot be parsed as a decimal number, or the value is
        NaN or infinite.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    return amount


class BankAccount:
    """Bank account holding a balance for one customer.

    The account keeps a shared reference to its customer; several accounts
    may point at the same ``BankCustomer``. The balance is read-only from
    outside and changes only through ``deposit`` and ``withdraw``.

    Neither operation validates its amount: negative deposits lower the
    balance and withdrawals may overdraw without limit. Instances are not
    thread-safe; callers sharing an account across threads must serialize
    access themselves.
    """

    __slots__ = ("customer", "_balance")

    def __init__(self, customer: BankCustomer, balance: Amount) -> None:
        self.customer = customer
        self._balance = to_amount(balance)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance."""
        amount = to_amount(amount)
        self._balance += amount
        logger.debug(
            "Deposit %s for customer %s, balance %s",
            amount,
            self.customer.customer_id,
            self._balance,
            extra=self._log_fields(change=amount),
        )
        self._warn_if_overdrawn()

    def withdraw(self, amount: Amount) -> None:
        """Subtract ``amount`` from the balance."""
        amount = to_amount(amount)
        self._balance -= amount
        logger.debug(
            "Withdraw %s for customer %s, balance %s",
            amount,
            self.customer.customer_id,
            self._balance,
            extra=self._log_fields(change=-amount),
        )
        self._warn_if_overdrawn()

    def _warn_if_overdrawn(self) -> None:
        if self._balance < 0:
            logger.warning(
                "Account for customer %s is overdrawn (balance %s); overdrafts are not checked",
                self.customer.customer_id,
                self._balance,
                extra=self._log_fields(),
            )

    def _log_fields(self, change: Decimal | None = None) -> dict[str, Decimal | str]:
        fields: dict[str, Decimal | str] = {
            "customer_id": self.customer.customer_id,
            "balance": self._balance,
        }
        if change is not None:
            fields["change"] = change
        return fields

    def __repr__(self) -> str:
        return f"BankAccount(customer={self.customer!r}, balance={self._balance!r})"
