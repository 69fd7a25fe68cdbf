"""
OrderManager - high-level operations of the Seller Center orders API.

Every operation follows the same flow: build a fresh ParameterSet from the
immutable base parameters, execute the action through the transport, map
the response body and log one INFO record on success.
"""

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Callable, Optional

from sellercenter.core.config import SellerCenterConfig
from sellercenter.domain.contracts import DeliveryType, OrderAction
from sellercenter.domain.models import FailureReason, Order, OrderItem
from sellercenter.domain.value_objects import ParameterSet

from . import parameters as params
from .interfaces import IRequestIdGenerator, ITransport
from .mappers import map_response
from .parameters import DEFAULT_LIMIT, DEFAULT_OFFSET, DEFAULT_SORT_BY, DEFAULT_SORT_DIRECTION


def generate_request_id() -> str:
    """Default request id source: a random UUID in hex."""
    return uuid.uuid4().hex


def _delivery_type_value(value: Any) -> Any:
    return value.value if isinstance(value, DeliveryType) else value


class OrderManager:
    """
    Orders API operations.

    Args:
        config: Immutable runtime configuration (its base parameters are
            merged into every request)
        transport: Executes signed actions
        request_id_generator: Source of correlation ids
        logger: Receives one INFO record per successful call
    """

    def __init__(
        self,
        config: SellerCenterConfig,
        transport: ITransport,
        request_id_generator: IRequestIdGenerator = generate_request_id,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.transport = transport
        self.generate_request_id = request_id_generator
        self.logger = logger or logging.getLogger(__name__)

    def _base_parameters(self) -> ParameterSet:
        return self.config.base_parameters

    def _call(
        self,
        action: OrderAction,
        parameters: ParameterSet,
        summary: Callable[[Any], str],
        http_method: str = "GET",
    ) -> Any:
        request_id = self.generate_request_id()

        response = self.transport.execute(action.value, request_id, parameters, http_method)
        result = map_response(action, response.body)

        self.logger.info(
            f"{request_id}::{action.value}::APIResponse::SellerCenterSdk: {summary(result)}",
            extra={
                "request_id": request_id,
                "action": action.value,
                "count": len(result) if isinstance(result, list) else None,
            },
        )

        return result

    # === ÓRDENES ===

    def get_order(self, order_id: int) -> Order:
        """
        Fetch a single order.

        Raises:
            MappingException: If the response has no order
        """
        parameters = self._base_parameters().merge({"OrderId": order_id})

        return self._call(
            OrderAction.GET_ORDER,
            parameters,
            summary=lambda order: "the order was recovered",
        )

    def get_orders(self, parameters: ParameterSet) -> list[Order]:
        """Execute GetOrders with already built parameters."""
        return self._call(
            OrderAction.GET_ORDERS,
            parameters,
            summary=lambda orders: f"{len(orders)} orders were recovered",
        )

    def _list_parameters(self, limit: int, offset: int, sort_by: str, sort_direction: str) -> ParameterSet:
        parameters = params.with_pagination(self._base_parameters(), limit, offset)
        return params.with_sort(parameters, sort_by, sort_direction)

    def get_orders_created_between(
        self,
        created_after: datetime,
        created_before: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.CREATED, after=created_after, before=created_before)

        return self.get_orders(parameters)

    def get_orders_updated_between(
        self,
        updated_after: datetime,
        updated_before: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.UPDATED, after=updated_after, before=updated_before)

        return self.get_orders(parameters)

    def get_orders_created_after(
        self,
        created_after: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.CREATED, after=created_after)

        return self.get_orders(parameters)

    def get_orders_created_before(
        self,
        created_before: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.CREATED, before=created_before)

        return self.get_orders(parameters)

    def get_orders_updated_after(
        self,
        updated_after: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.UPDATED, after=updated_after)

        return self.get_orders(parameters)

    def get_orders_updated_before(
        self,
        updated_before: datetime,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.UPDATED, before=updated_before)

        return self.get_orders(parameters)

    def get_orders_with_status(
        self,
        status: str,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        """
        Fetch orders in ``status``.

        Raises:
            InvalidDomainException: If ``status`` is not an OrderStatus value
        """
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_status(parameters, status)

        return self.get_orders(parameters)

    def get_orders_from_parameters(
        self,
        created_after: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        updated_after: Optional[datetime] = None,
        updated_before: Optional[datetime] = None,
        status: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        sort_by: str = DEFAULT_SORT_BY,
        sort_direction: str = DEFAULT_SORT_DIRECTION,
    ) -> list[Order]:
        """
        Fetch orders combining any of the filters.

        Unlike ``get_orders_with_status`` an unknown status is ignored here
        instead of raising.
        """
        parameters = self._list_parameters(limit, offset, sort_by, sort_direction)
        parameters = params.with_date_range(parameters, params.CREATED, after=created_after, before=created_before)
        parameters = params.with_date_range(parameters, params.UPDATED, after=updated_after, before=updated_before)
        parameters = params.with_optional_status(parameters, status)

        return self.get_orders(parameters)

    # === ITEMS ===

    def get_order_items(self, order_id: int) -> list[OrderItem]:
        parameters = self._base_parameters().merge({"OrderId": order_id})

        return self._call(
            OrderAction.GET_ORDER_ITEMS,
            parameters,
            summary=lambda items: f"{len(items)} order items were recovered",
        )

    def get_multiple_order_items(self, order_id_list: Iterable[int]) -> list[Order]:
        """
        Fetch the items of several orders at once.

        Returns:
            list[Order]: One order per entry in the response, with its items

        Raises:
            EmptyArgumentException: If ``order_id_list`` is empty
        """
        parameters = params.with_item_id_list(self._base_parameters(), "OrderIdList", order_id_list)

        return self._call(
            OrderAction.GET_MULTIPLE_ORDER_ITEMS,
            parameters,
            summary=lambda orders: f"{len(orders)} orders items were recovered",
        )

    # === CAMBIOS DE ESTADO ===

    def _set_status(
        self,
        action: OrderAction,
        order_item_ids: Iterable[int],
        delivery_type: str,
        shipping_provider: Optional[str] = None,
        tracking_number: Optional[str] = None,
    ) -> list[OrderItem]:
        parameters = params.with_item_id_list(self._base_parameters(), "OrderItemIds", order_item_ids)
        parameters = parameters.merge({"DeliveryType": _delivery_type_value(delivery_type)})

        if shipping_provider:
            parameters = parameters.merge({"ShippingProvider": shipping_provider})

        if tracking_number:
            parameters = parameters.merge({"TrackingNumber": tracking_number})

        return self._call(
            action,
            parameters,
            http_method="POST",
            summary=lambda items: "the items status was changed",
        )

    def set_status_to_packed_by_marketplace(
        self,
        order_item_ids: Iterable[int],
        delivery_type: str,
        shipping_provider: Optional[str] = None,
        tracking_number: Optional[str] = None,
    ) -> list[OrderItem]:
        """
        Mark items as packed by the marketplace.

        Raises:
            EmptyArgumentException: If ``order_item_ids`` is empty
        """
        return self._set_status(
            OrderAction.SET_STATUS_TO_PACKED_BY_MARKETPLACE,
            order_item_ids,
            delivery_type,
            shipping_provider,
            tracking_number,
        )

    def set_status_to_ready_to_ship(
        self,
        order_item_ids: Iterable[int],
        delivery_type: str,
        shipping_provider: Optional[str] = None,
        tracking_number: Optional[str] = None,
    ) -> list[OrderItem]:
        """
        Mark items as ready to ship.

        Raises:
            EmptyArgumentException: If ``order_item_ids`` is empty
        """
        return self._set_status(
            OrderAction.SET_STATUS_TO_READY_TO_SHIP,
            order_item_ids,
            delivery_type,
            shipping_provider,
            tracking_number,
        )

    def set_status_to_canceled(self, order_item_id: int, reason: str, reason_detail: Optional[str] = None) -> None:
        parameters = self._base_parameters().merge({"OrderItemId": order_item_id, "Reason": reason})

        if reason_detail:
            parameters = parameters.merge({"ReasonDetail": reason_detail})

        self._call(
            OrderAction.SET_STATUS_TO_CANCELED,
            parameters,
            http_method="POST",
            summary=lambda result: "the items status was changed",
        )

    # === RAZONES DE FALLO ===

    def get_failure_reasons(self) -> list[FailureReason]:
        return self._call(
            OrderAction.GET_FAILURE_REASONS,
            self._base_parameters(),
            summary=lambda reasons: f"{len(reasons)} failure reasons were recovered",
        )
