# -*- coding: utf-8 -*-
"""
Common exceptions for the dynamic-knapsack pipeline.

Validation errors are raised at the input boundary before any solve starts.
Computation errors abort a solve run as a whole; no partial result escapes.
"""


class SchemaError(ValueError):
    """Raised when an input file or stream violates the expected format."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InputValidationError(StateValidationError):
    """Raised when a user-supplied field is empty, non-integer or out of range."""


class EmptyItemSetError(InputValidationError):
    """Raised when a solve is requested with no items at all."""


class ComputationOverflowError(ArithmeticError):
    """Raised when a cumulative value leaves the representable range."""


class SolverInvariantError(AssertionError):
    """Raised when a DP witness disagrees with the state it claims to reach."""
