"""
Value objects for the domain layer.

Value objects are immutable objects that represent concepts
with no conceptual identity, only defined by their attributes.
"""

from .money import Money
from .parameter_set import ParameterSet

__all__ = ["Money", "ParameterSet"]
