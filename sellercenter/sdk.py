"""
SellerCenterSdk - entry point of the SDK.

Wires the immutable configuration, the HTTP transport and the managers::

    with SellerCenterSdk.from_settings() as sdk:
        orders = sdk.orders.get_orders_created_after(datetime(2024, 1, 1))
"""

import logging
from typing import Optional

import httpx

from sellercenter.clients.base_client import SellerCenterTransport
from sellercenter.core.config import SellerCenterConfig, Settings
from sellercenter.services.orders.interfaces import IRequestIdGenerator
from sellercenter.services.orders.order_manager import OrderManager, generate_request_id


class SellerCenterSdk:
    """
    Facade over the Seller Center managers.

    Attributes:
        config: Immutable runtime configuration
        transport: Shared HTTP transport
        orders: Orders API operations
    """

    def __init__(
        self,
        config: SellerCenterConfig,
        http_client: Optional[httpx.Client] = None,
        request_id_generator: IRequestIdGenerator = generate_request_id,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.transport = SellerCenterTransport(config, http_client=http_client)
        self.orders = OrderManager(
            config,
            self.transport,
            request_id_generator=request_id_generator,
            logger=logger,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "SellerCenterSdk":
        """Build the SDK from environment settings (``SELLERCENTER_*``)."""
        return cls(SellerCenterConfig.from_settings(settings), **kwargs)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "SellerCenterSdk":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self):
        return f"SellerCenterSdk(endpoint='{self.config.endpoint}', user_id='{self.config.user_id}')"
