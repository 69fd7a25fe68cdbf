"""
Factories that build domain records from Seller Center XML elements.

Each factory reads one element shape; the mappers decide which elements
of a response body are handed to which factory.
"""

from typing import Optional, Union
from xml.etree.ElementTree import Element

from sellercenter.domain.contracts import OrderStatus
from sellercenter.domain.models import Address, FailureReason, Order, OrderItem
from sellercenter.domain.value_objects import Money
from sellercenter.utils.xml_utils import (
    child_bool,
    child_datetime,
    child_decimal,
    child_int,
    child_text,
    required_int,
    required_text,
)


def _status(value: Optional[str]) -> Optional[Union[OrderStatus, str]]:
    """Known statuses map to OrderStatus, any other value is kept as sent."""
    if not value:
        return None
    if value in OrderStatus.values():
        return OrderStatus(value)
    return value


def _money(element: Element, tag: str, currency: Optional[str]) -> Optional[Money]:
    amount = child_decimal(element, tag)
    if amount is None:
        return None
    return Money(amount=amount, currency=currency)


class AddressFactory:
    """Factory for billing/shipping addresses."""

    @staticmethod
    def make(element: Optional[Element]) -> Optional[Address]:
        if element is None:
            return None

        return Address(
            first_name=child_text(element, "FirstName"),
            last_name=child_text(element, "LastName"),
            phone=child_text(element, "Phone"),
            phone2=child_text(element, "Phone2"),
            address1=child_text(element, "Address1"),
            address2=child_text(element, "Address2"),
            address3=child_text(element, "Address3"),
            address4=child_text(element, "Address4"),
            address5=child_text(element, "Address5"),
            customer_email=child_text(element, "CustomerEmail"),
            city=child_text(element, "City"),
            ward=child_text(element, "Ward"),
            region=child_text(element, "Region"),
            post_code=child_text(element, "PostCode"),
            country=child_text(element, "Country"),
        )


class OrderItemFactory:
    """Factory for order items."""

    @staticmethod
    def make(element: Element, order_id: Optional[int] = None) -> OrderItem:
        """
        Create an OrderItem from an ``OrderItem`` element.

        Args:
            element: The ``OrderItem`` element
            order_id: Owning order, overrides the element's ``OrderId``

        Returns:
            OrderItem: Created order item

        Raises:
            MappingException: If ``OrderItemId`` is missing or a value is malformed
        """
        currency = child_text(element, "Currency")

        return OrderItem(
            order_item_id=required_int(element, "OrderItemId"),
            order_id=order_id if order_id is not None else child_int(element, "OrderId"),
            shop_id=child_text(element, "ShopId"),
            name=child_text(element, "Name"),
            sku=child_text(element, "Sku"),
            variation=child_text(element, "Variation"),
            shop_sku=child_text(element, "ShopSku"),
            shipping_type=child_text(element, "ShippingType"),
            item_price=_money(element, "ItemPrice", currency),
            paid_price=_money(element, "PaidPrice", currency),
            currency=currency,
            wallet_credits=_money(element, "WalletCredits", currency),
            tax_amount=_money(element, "TaxAmount", currency),
            cod_collectable_amount=_money(element, "CodCollectableAmount", currency),
            shipping_amount=_money(element, "ShippingAmount", currency),
            shipping_service_cost=_money(element, "ShippingServiceCost", currency),
            voucher_amount=_money(element, "VoucherAmount", currency),
            voucher_code=child_text(element, "VoucherCode"),
            status=_status(child_text(element, "Status")),
            is_processable=child_bool(element, "IsProcessable"),
            shipment_provider=child_text(element, "ShipmentProvider"),
            is_digital=child_bool(element, "IsDigital"),
            digital_delivery_info=child_text(element, "DigitalDeliveryInfo"),
            tracking_code=child_text(element, "TrackingCode"),
            tracking_code_pre=child_text(element, "TrackingCodePre"),
            reason=child_text(element, "Reason"),
            reason_detail=child_text(element, "ReasonDetail"),
            purchase_order_id=child_int(element, "PurchaseOrderId"),
            purchase_order_number=child_text(element, "PurchaseOrderNumber"),
            package_id=child_text(element, "PackageId"),
            promised_shipping_time=child_datetime(element, "PromisedShippingTime"),
            extra_attributes=child_text(element, "ExtraAttributes"),
            shipping_provider_type=child_text(element, "ShippingProviderType"),
            created_at=child_datetime(element, "CreatedAt"),
            updated_at=child_datetime(element, "UpdatedAt"),
            return_status=child_text(element, "ReturnStatus"),
        )

    @staticmethod
    def make_from_status(element: Element) -> OrderItem:
        """Create an OrderItem from a status-change acknowledgement."""
        return OrderItem(
            order_item_id=required_int(element, "OrderItemId"),
            purchase_order_id=child_int(element, "PurchaseOrderId"),
            purchase_order_number=child_text(element, "PurchaseOrderNumber"),
            package_id=child_text(element, "PackageId"),
        )


class OrderFactory:
    """Factory for orders."""

    @staticmethod
    def make(element: Element, order_items: tuple[OrderItem, ...] = ()) -> Order:
        """
        Create an Order from an ``Order`` element.

        Args:
            element: The ``Order`` element
            order_items: Items already built for this order

        Returns:
            Order: Created order

        Raises:
            MappingException: If ``OrderId`` is missing or a value is malformed
        """
        statuses_node = element.find("Statuses")
        statuses: tuple[Union[OrderStatus, str], ...] = ()
        if statuses_node is not None:
            statuses = tuple(
                _status((node.text or "").strip())
                for node in statuses_node.findall("Status")
                if (node.text or "").strip()
            )

        return Order(
            order_id=required_int(element, "OrderId"),
            order_number=child_text(element, "OrderNumber"),
            customer_first_name=child_text(element, "CustomerFirstName"),
            customer_last_name=child_text(element, "CustomerLastName"),
            payment_method=child_text(element, "PaymentMethod"),
            remarks=child_text(element, "Remarks"),
            delivery_info=child_text(element, "DeliveryInfo"),
            price=child_decimal(element, "Price"),
            gift_option=child_bool(element, "GiftOption"),
            gift_message=child_text(element, "GiftMessage"),
            voucher_code=child_text(element, "VoucherCode"),
            created_at=child_datetime(element, "CreatedAt"),
            updated_at=child_datetime(element, "UpdatedAt"),
            address_updated_at=child_datetime(element, "AddressUpdatedAt"),
            address_billing=AddressFactory.make(element.find("AddressBilling")),
            address_shipping=AddressFactory.make(element.find("AddressShipping")),
            national_registration_number=child_text(element, "NationalRegistrationNumber"),
            items_count=child_int(element, "ItemsCount"),
            promised_shipping_time=child_datetime(element, "PromisedShippingTime"),
            extra_attributes=child_text(element, "ExtraAttributes"),
            statuses=statuses,
            order_items=order_items,
        )


class FailureReasonFactory:
    """Factory for failure reasons."""

    @staticmethod
    def make(element: Element) -> FailureReason:
        return FailureReason(
            type=required_text(element, "Type"),
            name=required_text(element, "Name"),
        )
