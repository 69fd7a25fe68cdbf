"""
Request parameter builders for the orders API.

Each ``with_*`` function takes a ParameterSet and returns a new one with
its parameters applied; the input is never modified. Validation and
defaulting rules are shared by every list operation.

Note:
    ``with_status`` rejects an unknown status while ``with_optional_status``
    (used by the composite filter) silently drops it. The API has always
    behaved this way and callers rely on both behaviors.
"""

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from sellercenter.domain.contracts import OrderSortDirection, OrderSortFilter, OrderStatus
from sellercenter.domain.value_objects import ParameterSet
from sellercenter.utils.error_handler import EmptyArgumentException, InvalidDomainException

DEFAULT_LIMIT = 1000
DEFAULT_OFFSET = 0
DEFAULT_SORT_BY = OrderSortFilter.CREATED_AT.value
DEFAULT_SORT_DIRECTION = OrderSortDirection.ASC.value

# No timezone offset, no fractional seconds
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

CREATED = "Created"
UPDATED = "Updated"


def format_datetime(value: datetime) -> str:
    """
    Serialize a datetime in the profile the API expects.

    The value is written in its own timezone; callers that need UTC must
    pass a UTC datetime.
    """
    return value.strftime(DATETIME_FORMAT)


def with_pagination(parameters: ParameterSet, limit: int, offset: int) -> ParameterSet:
    """
    Apply ``Limit`` and ``Offset``.

    A limit below 1 falls back to DEFAULT_LIMIT and a negative offset to
    DEFAULT_OFFSET; this never fails.
    """
    verified_limit = limit if limit >= 1 else DEFAULT_LIMIT
    verified_offset = DEFAULT_OFFSET if offset < 0 else offset

    return parameters.merge({"Limit": verified_limit, "Offset": verified_offset})


def with_sort(parameters: ParameterSet, sort_by: str, sort_direction: str) -> ParameterSet:
    """
    Apply ``SortBy`` and ``SortDirection``.

    Values outside the allowed sets are replaced by the defaults
    (created_at, ASC) without raising.
    """
    if sort_by not in OrderSortFilter.values():
        sort_by = DEFAULT_SORT_BY

    if sort_direction not in OrderSortDirection.values():
        sort_direction = DEFAULT_SORT_DIRECTION

    return parameters.merge(
        {
            "SortBy": OrderSortFilter(sort_by).value,
            "SortDirection": OrderSortDirection(sort_direction).value,
        }
    )


def with_date_range(
    parameters: ParameterSet,
    field_prefix: str,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
) -> ParameterSet:
    """
    Apply ``<prefix>After`` and/or ``<prefix>Before``.

    Args:
        parameters: Parameters to extend
        field_prefix: ``Created`` or ``Updated``
        after: Lower bound, skipped when None
        before: Upper bound, skipped when None
    """
    if field_prefix not in (CREATED, UPDATED):
        raise ValueError(f"Unknown date field prefix: {field_prefix}")

    values = {}
    if after is not None:
        values[f"{field_prefix}After"] = format_datetime(after)
    if before is not None:
        values[f"{field_prefix}Before"] = format_datetime(before)

    return parameters.merge(values)


def with_status(parameters: ParameterSet, status: str) -> ParameterSet:
    """
    Apply ``Status``.

    Raises:
        InvalidDomainException: If ``status`` is not an OrderStatus value
    """
    if status not in OrderStatus.values():
        raise InvalidDomainException("Status", invalid_value=status)

    return parameters.merge({"Status": OrderStatus(status).value})


def with_optional_status(parameters: ParameterSet, status: Optional[str]) -> ParameterSet:
    """Apply ``Status`` only when it is a valid OrderStatus value."""
    if not status or status not in OrderStatus.values():
        return parameters

    return parameters.merge({"Status": OrderStatus(status).value})


def with_item_id_list(parameters: ParameterSet, key: str, ids: Iterable[int]) -> ParameterSet:
    """
    Apply a list of identifiers as a compact JSON array under ``key``.

    Raises:
        EmptyArgumentException: If ``ids`` is empty
    """
    id_list = list(ids)
    if not id_list:
        raise EmptyArgumentException(key)

    return parameters.merge({key: json.dumps(id_list, separators=(",", ":"))})
