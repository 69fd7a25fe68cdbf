"""
Fixed enumerations accepted or returned by the Seller Center orders API.
"""

from enum import Enum


class OrderAction(str, Enum):
    """Remote actions exposed by the orders API."""

    GET_ORDER = "GetOrder"
    GET_ORDERS = "GetOrders"
    GET_ORDER_ITEMS = "GetOrderItems"
    GET_MULTIPLE_ORDER_ITEMS = "GetMultipleOrderItems"
    SET_STATUS_TO_PACKED_BY_MARKETPLACE = "SetStatusToPackedByMarketplace"
    SET_STATUS_TO_READY_TO_SHIP = "SetStatusToReadyToShip"
    SET_STATUS_TO_CANCELED = "SetStatusToCanceled"
    GET_FAILURE_REASONS = "GetFailureReasons"


class OrderStatus(str, Enum):
    """Order and order item statuses."""

    PENDING = "pending"
    CANCELED = "canceled"
    READY_TO_SHIP = "ready_to_ship"
    DELIVERED = "delivered"
    RETURNED = "returned"
    SHIPPED = "shipped"
    FAILED = "failed"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


class OrderSortFilter(str, Enum):
    """Fields GetOrders can sort by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    @classmethod
    def values(cls) -> list[str]:
        return [sort_filter.value for sort_filter in cls]


class OrderSortDirection(str, Enum):
    """Sort directions accepted by GetOrders."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def values(cls) -> list[str]:
        return [direction.value for direction in cls]


class DeliveryType(str, Enum):
    """Delivery types for the status-change actions."""

    DROPSHIP = "dropship"
    PICKUP = "pickup"
    SEND_TO_WAREHOUSE = "send_to_warehouse"
