"""
Interfaces/Protocols for the order services (Dependency Inversion Principle).

The order manager only depends on these contracts, so the HTTP transport
and the request id source can be replaced in tests.
"""

from typing import Optional, Protocol

from sellercenter.clients.response import SellerCenterResponse
from sellercenter.domain.value_objects import ParameterSet


class ITransport(Protocol):
    """Protocol for executing a signed Seller Center action."""

    def execute(
        self,
        action: str,
        request_id: str,
        parameters: Optional[ParameterSet] = None,
        http_method: str = "GET",
    ) -> SellerCenterResponse:
        """Execute ``action`` and return its parsed response."""
        ...


class IRequestIdGenerator(Protocol):
    """Protocol for request correlation identifiers."""

    def __call__(self) -> str:
        """Return a new unique request id."""
        ...
