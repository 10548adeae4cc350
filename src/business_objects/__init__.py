# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    InvalidItem,
    NoFeasibleSolution,
    ComplexityExceeded,
)
from .items import Item

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InvalidItem",
    "NoFeasibleSolution",
    "ComplexityExceeded",
    # core models
    "Item",
]
