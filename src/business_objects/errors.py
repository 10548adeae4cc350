# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InvalidItem(StateValidationError):
    """Raised when an item has a non-positive/non-finite weight or a non-finite benefit."""


class NoFeasibleSolution(ValueError):
    """Raised when no subset (not even the empty one) fits the capacity."""


class ComplexityExceeded(ValueError):
    """Raised when the item count exceeds the configured enumeration bound."""
