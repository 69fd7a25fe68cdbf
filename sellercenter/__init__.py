"""
Seller Center SDK.

Client for the Seller Center orders API: signed requests, typed
parameters and XML responses mapped onto immutable domain records.
"""

from sellercenter.core.config import SellerCenterConfig
from sellercenter.domain.contracts import DeliveryType, OrderSortDirection, OrderSortFilter, OrderStatus
from sellercenter.domain.models import Address, FailureReason, Order, OrderItem
from sellercenter.sdk import SellerCenterSdk
from sellercenter.utils.error_handler import (
    AppException,
    EmptyArgumentException,
    InvalidDomainException,
    MappingException,
    SellerCenterAPIException,
)
from sellercenter.version import VERSION

__version__ = VERSION

__all__ = [
    "Address",
    "AppException",
    "DeliveryType",
    "EmptyArgumentException",
    "FailureReason",
    "InvalidDomainException",
    "MappingException",
    "Order",
    "OrderItem",
    "OrderSortDirection",
    "OrderSortFilter",
    "OrderStatus",
    "SellerCenterAPIException",
    "SellerCenterConfig",
    "SellerCenterSdk",
]
