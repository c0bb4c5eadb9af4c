"""Customer model for banking domain."""

from dataclasses import dataclass

DEFAULT_FIRST_NAME = "Tim"
DEFAULT_LAST_NAME = "Shao"
DEFAULT_CUSTOMER_ID = "1010101010"


@dataclass(frozen=True)
class BankCustomer:
    """Bank customer identity.

    Supports the three construction forms of the exercise:

    - ``BankCustomer()``: all defaults (Tim Shao, ``1010101010``)
    - ``BankCustomer(first, last)``: default identifier
    - ``BankCustomer(first, last, customer_id)``: explicit identifier

    Values are stored as given. Empty names and identifiers of any format
    are accepted.
    """

    first_name: str = DEFAULT_FIRST_NAME
    last_name: str = DEFAULT_LAST_NAME
    customer_id: str = DEFAULT_CUSTOMER_ID

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
