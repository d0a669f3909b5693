# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    InputValidationError,
    EmptyItemSetError,
    ComputationOverflowError,
    SolverInvariantError,
)
from .items import Item

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InputValidationError",
    "EmptyItemSetError",
    "ComputationOverflowError",
    "SolverInvariantError",
    # core models
    "Item",
]
