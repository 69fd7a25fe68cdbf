"""
Domain models for the records returned by Seller Center.

Records are immutable once built from a response.
"""

from .address import Address
from .failure_reason import FailureReason
from .order import Order
from .order_item import OrderItem

__all__ = ["Address", "FailureReason", "Order", "OrderItem"]
