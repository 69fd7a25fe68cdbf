"""
ParameterSet value object: the flat key/value payload of one request.

Every call starts from the immutable base parameters in the configuration
and derives its own ParameterSet through ``merge``; the base is never touched.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional, Union

Scalar = Union[str, int, float, bool]


class ParameterSet(Mapping):
    """
    Ordered, immutable mapping from parameter name to a scalar or
    pre-serialized value.

    Keys are unique and keep first-insertion order; merging an existing key
    replaces its value (last write wins) without moving it.

    Example:
        >>> base = ParameterSet({"Limit": 10})
        >>> derived = base.merge({"Limit": 20, "Offset": 0})
        >>> dict(base), dict(derived)
        ({'Limit': 10}, {'Limit': 20, 'Offset': 0})
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Scalar]] = None):
        self._values: dict[str, Scalar] = dict(values or {})

    def __getitem__(self, key: str) -> Scalar:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_values"):
            raise AttributeError("ParameterSet is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"ParameterSet({self._values!r})"

    def merge(self, values: Mapping[str, Scalar]) -> "ParameterSet":
        """Return a new ParameterSet with ``values`` applied over this one."""
        merged = dict(self._values)
        merged.update(values)
        return ParameterSet(merged)

    def to_dict(self) -> dict[str, Scalar]:
        """Return a mutable copy, safe to hand to the transport."""
        return dict(self._values)
