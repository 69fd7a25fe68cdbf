"""
Money value object for monetary amounts reported by Seller Center.

Order items report prices as decimal strings alongside a currency code;
this value object keeps both together with Decimal precision.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount with currency.

    Attributes:
        amount: The monetary amount as Decimal for precision
        currency: Currency code (e.g., "MXN", "COP"), None when the API omits it

    Example:
        >>> price = Money.from_string("99.90", "MXN")
        >>> str(price)
        'MXN 99.90'
    """

    amount: Decimal
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate money object after initialization."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        # Seller Center reports two decimal places
        normalized_amount = self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", normalized_amount)

        if self.currency and len(self.currency) != 3:
            raise ValueError(f"Invalid currency code: {self.currency}")

    def __str__(self) -> str:
        """String representation of Money."""
        if not self.currency:
            return f"{self.amount:.2f}"
        return f"{self.currency} {self.amount:.2f}"

    @classmethod
    def from_string(cls, amount: str, currency: Optional[str] = None) -> "Money":
        """
        Create Money from the string representation used on the wire.

        Raises:
            ValueError: If the string is not a decimal number
        """
        try:
            return cls(amount=Decimal(amount.strip()), currency=currency)
        except InvalidOperation as e:
            raise ValueError(f"Invalid monetary amount: {amount!r}") from e
