"""
Address domain model (billing and shipping addresses of an order).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Address:
    """
    Postal address attached to an order.

    Every field is optional; an element missing from the response is
    ``None`` while an element present but empty is ``""``.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    phone2: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    address4: Optional[str] = None
    address5: Optional[str] = None
    customer_email: Optional[str] = None
    city: Optional[str] = None
    ward: Optional[str] = None
    region: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None

    @property
    def full_name(self) -> str:
        """First and last name joined, skipping the absent ones."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
