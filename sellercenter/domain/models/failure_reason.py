"""
Failure reason domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FailureReason:
    """
    Why an order item status change may be rejected.

    Attributes:
        type: Reason code as defined by the API (e.g. "canceled")
        name: Human readable description
    """

    type: str
    name: str
