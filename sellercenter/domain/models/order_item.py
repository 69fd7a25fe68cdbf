"""
Order item domain model.

A single line within an order, independently trackable for fulfillment.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from sellercenter.domain.contracts import OrderStatus
from sellercenter.domain.value_objects.money import Money


@dataclass(frozen=True)
class OrderItem:
    """
    Domain model representing an order item.

    The owning order is referenced by ``order_id`` only. Items returned by
    the status-change actions carry just the identifier and the purchase
    order / package data, every other field stays ``None``.

    Attributes:
        order_item_id: Remote order item identifier
        order_id: Identifier of the owning order
        shop_id: Seller shop identifier
        name: Product name
        sku: Seller SKU
        variation: Product variation
        shop_sku: Marketplace SKU
        shipping_type: Shipping type
        item_price: Unit price
        paid_price: Price paid by the customer
        currency: Currency code reported for the item
        wallet_credits: Wallet credits applied
        tax_amount: Tax amount
        cod_collectable_amount: Cash on delivery amount to collect
        shipping_amount: Shipping charged to the customer
        shipping_service_cost: Shipping service cost
        voucher_amount: Voucher discount
        voucher_code: Voucher code
        status: Item status (OrderStatus when known, the raw value otherwise)
        is_processable: Whether the item can be processed
        shipment_provider: Shipment provider name
        is_digital: Whether the item is digital
        digital_delivery_info: Delivery info for digital items
        tracking_code: Tracking number
        tracking_code_pre: Pre-assigned tracking number
        reason: Cancel/return reason
        reason_detail: Cancel/return reason detail
        purchase_order_id: Purchase order identifier
        purchase_order_number: Purchase order number
        package_id: Package identifier
        promised_shipping_time: Shipping deadline
        extra_attributes: Raw extra attributes payload
        shipping_provider_type: Shipping provider type
        created_at: Creation time
        updated_at: Last update time
        return_status: Return status
    """

    order_item_id: int
    order_id: Optional[int] = None
    shop_id: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    variation: Optional[str] = None
    shop_sku: Optional[str] = None
    shipping_type: Optional[str] = None
    item_price: Optional[Money] = None
    paid_price: Optional[Money] = None
    currency: Optional[str] = None
    wallet_credits: Optional[Money] = None
    tax_amount: Optional[Money] = None
    cod_collectable_amount: Optional[Money] = None
    shipping_amount: Optional[Money] = None
    shipping_service_cost: Optional[Money] = None
    voucher_amount: Optional[Money] = None
    voucher_code: Optional[str] = None
    status: Optional[Union[OrderStatus, str]] = None
    is_processable: Optional[bool] = None
    shipment_provider: Optional[str] = None
    is_digital: Optional[bool] = None
    digital_delivery_info: Optional[str] = None
    tracking_code: Optional[str] = None
    tracking_code_pre: Optional[str] = None
    reason: Optional[str] = None
    reason_detail: Optional[str] = None
    purchase_order_id: Optional[int] = None
    purchase_order_number: Optional[str] = None
    package_id: Optional[str] = None
    promised_shipping_time: Optional[datetime] = None
    extra_attributes: Optional[str] = None
    shipping_provider_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    return_status: Optional[str] = None

    @property
    def has_tracking_code(self) -> bool:
        """Check if a non-empty tracking code was reported."""
        return bool(self.tracking_code)
