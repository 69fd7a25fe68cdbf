"""
Order domain model.

Represents an order as reported by Seller Center. Optional fields that are
absent from the response stay ``None`` so they can't be confused with an
empty or zero value the API actually sent.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from sellercenter.domain.contracts import OrderStatus

from .address import Address
from .order_item import OrderItem


@dataclass(frozen=True)
class Order:
    """
    Domain model representing a Seller Center order.

    Attributes:
        order_id: Remote order identifier
        order_number: Customer facing order number
        customer_first_name: Customer first name
        customer_last_name: Customer last name
        payment_method: Payment method name
        remarks: Seller remarks
        delivery_info: Delivery information
        price: Order total
        gift_option: Whether the order is a gift
        gift_message: Gift message
        voucher_code: Voucher applied to the order
        created_at: Creation time
        updated_at: Last update time
        address_updated_at: Last address change
        address_billing: Billing address
        address_shipping: Shipping address
        national_registration_number: Customer tax/registration id
        items_count: Number of items in the order
        promised_shipping_time: Shipping deadline promised to the customer
        extra_attributes: Raw extra attributes payload
        statuses: Distinct statuses of the order items (OrderStatus when
            known, the raw value otherwise)
        order_items: Items of the order, only filled by GetMultipleOrderItems
    """

    order_id: int
    order_number: Optional[str] = None
    customer_first_name: Optional[str] = None
    customer_last_name: Optional[str] = None
    payment_method: Optional[str] = None
    remarks: Optional[str] = None
    delivery_info: Optional[str] = None
    price: Optional[Decimal] = None
    gift_option: Optional[bool] = None
    gift_message: Optional[str] = None
    voucher_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    address_updated_at: Optional[datetime] = None
    address_billing: Optional[Address] = None
    address_shipping: Optional[Address] = None
    national_registration_number: Optional[str] = None
    items_count: Optional[int] = None
    promised_shipping_time: Optional[datetime] = None
    extra_attributes: Optional[str] = None
    statuses: tuple[Union[OrderStatus, str], ...] = ()
    order_items: tuple[OrderItem, ...] = ()

    @property
    def customer_full_name(self) -> str:
        """Customer first and last name, skipping the absent ones."""
        return " ".join(part for part in (self.customer_first_name, self.customer_last_name) if part)

    def has_status(self, status: Union[OrderStatus, str]) -> bool:
        """Check if any item of the order is in ``status``."""
        return status in self.statuses
