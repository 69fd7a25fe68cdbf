"""
Response mappers for the orders API.

Each remote action answers with its own body shape, so every action has a
named mapping strategy registered in ``RESPONSE_MAPPERS``:

- GetOrder: exactly one ``Orders/Order``
- GetOrders: zero or more ``Orders/Order``
- GetOrderItems: zero or more ``OrderItems/OrderItem``
- GetMultipleOrderItems: ``Orders/Order`` each nesting ``OrderItems/OrderItem``
- SetStatusTo*: ``OrderItems/OrderItem`` acknowledgements, no owning order
- GetFailureReasons: ``Reasons/Reason``

A missing or empty container maps to an empty list. Records keep the order
in which they appear in the body.
"""

from typing import Any, Callable
from xml.etree.ElementTree import Element

from sellercenter.domain.contracts import OrderAction
from sellercenter.domain.models import FailureReason, Order, OrderItem
from sellercenter.utils.error_handler import MappingException
from sellercenter.utils.xml_utils import required_int

from .factories import FailureReasonFactory, OrderFactory, OrderItemFactory

ResponseMapper = Callable[[Element], Any]


def _children(body: Element, container: str, tag: str) -> list[Element]:
    node = body.find(container)
    if node is None:
        return []
    return node.findall(tag)


def map_single_order(body: Element) -> Order:
    """
    Map a GetOrder body.

    Raises:
        MappingException: If the body has no ``Orders/Order`` element
    """
    element = body.find("Orders/Order")
    if element is None:
        raise MappingException("Response has no Orders/Order node", node="Order")
    return OrderFactory.make(element)


def map_orders(body: Element) -> list[Order]:
    return [OrderFactory.make(element) for element in _children(body, "Orders", "Order")]


def map_order_items(body: Element) -> list[OrderItem]:
    return [OrderItemFactory.make(element) for element in _children(body, "OrderItems", "OrderItem")]


def map_multiple_order_items(body: Element) -> list[Order]:
    """
    Map a GetMultipleOrderItems body.

    Every order keeps its nested items, each pointing back to the order
    through ``order_id``.
    """
    orders = []
    for order_element in _children(body, "Orders", "Order"):
        order_id = required_int(order_element, "OrderId")
        items = tuple(
            OrderItemFactory.make(item_element, order_id=order_id)
            for item_element in _children(order_element, "OrderItems", "OrderItem")
        )
        orders.append(OrderFactory.make(order_element, order_items=items))
    return orders


def map_status_change(body: Element) -> list[OrderItem]:
    return [OrderItemFactory.make_from_status(element) for element in _children(body, "OrderItems", "OrderItem")]


def map_failure_reasons(body: Element) -> list[FailureReason]:
    return [FailureReasonFactory.make(element) for element in _children(body, "Reasons", "Reason")]


def map_no_content(body: Element) -> None:
    return None


RESPONSE_MAPPERS: dict[OrderAction, ResponseMapper] = {
    OrderAction.GET_ORDER: map_single_order,
    OrderAction.GET_ORDERS: map_orders,
    OrderAction.GET_ORDER_ITEMS: map_order_items,
    OrderAction.GET_MULTIPLE_ORDER_ITEMS: map_multiple_order_items,
    OrderAction.SET_STATUS_TO_PACKED_BY_MARKETPLACE: map_status_change,
    OrderAction.SET_STATUS_TO_READY_TO_SHIP: map_status_change,
    OrderAction.SET_STATUS_TO_CANCELED: map_no_content,
    OrderAction.GET_FAILURE_REASONS: map_failure_reasons,
}


def map_response(action: OrderAction, body: Element) -> Any:
    """Map ``body`` with the strategy registered for ``action``."""
    return RESPONSE_MAPPERS[action](body)
