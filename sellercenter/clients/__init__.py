"""
Seller Center HTTP clients.
"""

from .base_client import SellerCenterTransport
from .response import SellerCenterResponse, parse_response

__all__ = ["SellerCenterTransport", "SellerCenterResponse", "parse_response"]
