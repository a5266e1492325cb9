"""Validation utilities for object-model ownership annotations.

This module provides the one-call validation entry point, separated from
the builder and checkers for better modularity and testability.

Python 3.13+.
"""

from ownergraph.validation.ownership import (
    OwnershipReport,
    validate_ownership,
)

__all__ = [
    "OwnershipReport",
    "validate_ownership",
]
