"""
Seller Center response envelope.

Successful calls answer with::

    <SuccessResponse>
      <Head><RequestId/><RequestAction>GetOrders</RequestAction>...</Head>
      <Body>...</Body>
    </SuccessResponse>

and failures with an ``ErrorResponse`` whose ``Head`` carries ``ErrorType``,
``ErrorCode`` and ``ErrorMessage``.
"""

from dataclasses import dataclass, field
from typing import Optional
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from sellercenter.utils.error_handler import SellerCenterAPIException

SUCCESS_RESPONSE = "SuccessResponse"
ERROR_RESPONSE = "ErrorResponse"


@dataclass(frozen=True)
class SellerCenterResponse:
    """
    Parsed response of one action.

    Attributes:
        request_id: Identifier generated for the call
        head: Text of each ``Head`` child
        body: The ``Body`` element (empty when the API sends none)
    """

    request_id: str
    head: dict[str, str] = field(default_factory=dict)
    body: Element = field(default_factory=lambda: Element("Body"))

    @property
    def action(self) -> Optional[str]:
        return self.head.get("RequestAction")


def _head(root: Element) -> dict[str, str]:
    head = root.find("Head")
    if head is None:
        return {}
    return {child.tag: (child.text or "").strip() for child in head}


def parse_response(
    content: bytes,
    request_id: str,
    action: str,
    http_status: Optional[int] = None,
) -> SellerCenterResponse:
    """
    Parse a raw response body.

    Args:
        content: Raw HTTP body
        request_id: Identifier generated for the call
        action: Action that was executed
        http_status: HTTP status code of the response

    Returns:
        SellerCenterResponse: Parsed success response

    Raises:
        SellerCenterAPIException: For ErrorResponse bodies, unparseable or
            unexpected documents and non-2xx responses
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise SellerCenterAPIException(
            f"{action}: invalid XML response ({e})",
            http_status=http_status,
            action=action,
        ) from e

    head = _head(root)

    if root.tag == ERROR_RESPONSE:
        raw_code = head.get("ErrorCode")
        raise SellerCenterAPIException(
            f"{action}: {head.get('ErrorMessage') or 'Unknown error'}",
            api_error_code=int(raw_code) if raw_code and raw_code.isdigit() else None,
            error_type=head.get("ErrorType") or None,
            http_status=http_status,
            action=action,
        )

    if root.tag != SUCCESS_RESPONSE:
        raise SellerCenterAPIException(
            f"{action}: unexpected response root <{root.tag}>",
            http_status=http_status,
            action=action,
        )

    if http_status is not None and not 200 <= http_status < 300:
        raise SellerCenterAPIException(
            f"{action}: HTTP {http_status}",
            http_status=http_status,
            action=action,
        )

    body = root.find("Body")
    return SellerCenterResponse(
        request_id=request_id,
        head=head,
        body=body if body is not None else Element("Body"),
    )
