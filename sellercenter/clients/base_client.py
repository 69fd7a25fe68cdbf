"""
Base Seller Center HTTP client.

This module provides the transport used by every manager: it adds the
authentication parameters, signs the request, executes it with httpx and
parses the XML envelope.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

import httpx

from sellercenter.core.config import SellerCenterConfig
from sellercenter.core.logging_config import log_api_call
from sellercenter.domain.value_objects import ParameterSet
from sellercenter.utils.error_handler import SellerCenterAPIException
from sellercenter.utils.signature import encode_parameters, sign
from sellercenter.version import VERSION

from .response import SellerCenterResponse, parse_response

logger = logging.getLogger(__name__)


class SellerCenterTransport:
    """
    Synchronous transport for the Seller Center API.

    Owns an ``httpx.Client``; one instance can be shared by every manager.
    No retries are attempted, failures surface as SellerCenterAPIException.
    """

    def __init__(self, config: SellerCenterConfig, http_client: Optional[httpx.Client] = None):
        """
        Initialize the transport.

        Args:
            config: Immutable runtime configuration
            http_client: Pre-built client (tests inject one with a MockTransport)
        """
        self.config = config
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(
            timeout=httpx.Timeout(config.timeout_seconds),
            headers={
                "Accept": "application/xml",
                "User-Agent": f"SellerCenterSdk/{VERSION}",
            },
        )

        logger.debug(f"Initialized Seller Center transport for {self.config.endpoint}")

    def __enter__(self) -> "SellerCenterTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self.http_client.close()

    def build_query(self, action: str, parameters: Optional[ParameterSet] = None) -> str:
        """
        Build the signed query string for ``action``.

        Args:
            action: Remote action name
            parameters: Action parameters

        Returns:
            str: Encoded query string ending with ``Signature``
        """
        signed = (parameters or ParameterSet()).merge(
            {
                "Action": action,
                "Format": self.config.response_format,
                "Timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
                "UserID": self.config.user_id,
                "Version": self.config.version,
            }
        )
        signature = sign(signed, self.config.api_key)
        return f"{encode_parameters(signed)}&Signature={signature}"

    def execute(
        self,
        action: str,
        request_id: str,
        parameters: Optional[ParameterSet] = None,
        http_method: str = "GET",
    ) -> SellerCenterResponse:
        """
        Execute an action.

        Args:
            action: Remote action name
            request_id: Correlation id, sent as ``X-Request-Id``
            parameters: Action parameters
            http_method: ``GET`` for reads, ``POST`` for status changes

        Returns:
            SellerCenterResponse: Parsed success response

        Raises:
            SellerCenterAPIException: On network errors or error responses
        """
        url = f"{self.config.endpoint}/?{self.build_query(action, parameters)}"
        start = time.monotonic()

        try:
            response = self.http_client.request(http_method, url, headers={"X-Request-Id": request_id})
        except httpx.HTTPError as e:
            raise SellerCenterAPIException(f"{action}: network error: {e}", action=action) from e

        log_api_call(http_method, action, response.status_code, time.monotonic() - start, request_id=request_id)

        return parse_response(response.content, request_id, action, http_status=response.status_code)

    def __repr__(self):
        return f"SellerCenterTransport(endpoint='{self.config.endpoint}', version='{self.config.version}')"
