"""
Request signing for the Seller Center API.

The API authenticates each request with an HMAC-SHA256 signature of the
sorted, RFC 3986 encoded query string, keyed by the seller's API key.
"""

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote


def encode_parameters(parameters: Mapping[str, Any]) -> str:
    """
    Build the canonical query string: keys sorted, ``%20`` for spaces.

    Args:
        parameters: Request parameters, without ``Signature``

    Returns:
        str: Encoded query string
    """
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(_scalar(value)), safe='')}"
        for key, value in sorted(parameters.items())
    )


def sign(parameters: Mapping[str, Any], api_key: str) -> str:
    """
    Compute the request signature.

    Returns:
        str: Hex encoded HMAC-SHA256 digest
    """
    return hmac.new(
        api_key.encode("utf-8"),
        encode_parameters(parameters).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    return value
