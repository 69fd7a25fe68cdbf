"""
Typed readers for Seller Center XML elements.

Every reader distinguishes an absent child element (``None``) from one that
is present but empty; malformed values raise MappingException instead of
being coerced.
"""

import re
from datetime import datetime
from decimal import Decimal
from typing import Optional
from xml.etree.ElementTree import Element

from sellercenter.utils.error_handler import MappingException

# Seller Center writes timestamps without offset, with a space or a "T"
DATETIME_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S")

TRUE_VALUES = {"1", "true", "yes"}
FALSE_VALUES = {"0", "false", "no"}

# Plain decimal, optionally with comma thousands groups ("1,499.90")
DECIMAL_PATTERN = re.compile(r"-?(\d+|\d{1,3}(,\d{3})+)(\.\d+)?")


def child_text(element: Element, tag: str) -> Optional[str]:
    """Text of the ``tag`` child: None if absent, "" if present but empty."""
    child = element.find(tag)
    if child is None:
        return None
    return (child.text or "").strip()


def required_text(element: Element, tag: str) -> str:
    """
    Text of a required child element.

    Raises:
        MappingException: If the child is absent or empty
    """
    value = child_text(element, tag)
    if not value:
        raise MappingException(f"Missing required node {element.tag}/{tag}", node=tag)
    return value


def child_int(element: Element, tag: str) -> Optional[int]:
    value = child_text(element, tag)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise MappingException(f"Node {element.tag}/{tag} is not an integer: {value!r}", node=tag) from e


def required_int(element: Element, tag: str) -> int:
    value = required_text(element, tag)
    try:
        return int(value)
    except ValueError as e:
        raise MappingException(f"Node {element.tag}/{tag} is not an integer: {value!r}", node=tag) from e


def child_decimal(element: Element, tag: str) -> Optional[Decimal]:
    value = child_text(element, tag)
    if not value:
        return None
    if not DECIMAL_PATTERN.fullmatch(value):
        raise MappingException(f"Node {element.tag}/{tag} is not a decimal: {value!r}", node=tag)
    return Decimal(value.replace(",", ""))


def child_bool(element: Element, tag: str) -> Optional[bool]:
    value = child_text(element, tag)
    if not value:
        return None
    if value.lower() in TRUE_VALUES:
        return True
    if value.lower() in FALSE_VALUES:
        return False
    raise MappingException(f"Node {element.tag}/{tag} is not a boolean: {value!r}", node=tag)


def child_datetime(element: Element, tag: str) -> Optional[datetime]:
    """Parse a naive timestamp; the API does not send offsets."""
    value = child_text(element, tag)
    if not value:
        return None
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise MappingException(f"Node {element.tag}/{tag} is not a timestamp: {value!r}", node=tag)
