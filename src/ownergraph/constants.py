"""Shared constants for ownergraph.

This module provides centralized configuration constants used across the
graph, introspection, and analysis packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Node numbering: Identifier assignment in the graph builder
- Shape limits: Which sequence members the builder can model
- Introspection: Value-type detection and dataclass field metadata

Python 3.13+. Zero external dependencies.
"""

from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from uuid import UUID

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Node numbering
    "FIRST_NODE_ID",
    # Shape limits
    "MAX_SEQUENCE_RANK",
    # Introspection
    "VALUE_TYPES",
    "OWNERSHIP_METADATA_KEY",
]

# ============================================================================
# NODE NUMBERING
# ============================================================================

# Identifier of the first discovered node (the root).
# Subsequent nodes are numbered consecutively in discovery order.
FIRST_NODE_ID: int = 1

# ============================================================================
# SHAPE LIMITS
# ============================================================================

# Highest sequence dimensionality the builder can turn into edges.
# A rank-2 (or higher) sequence member aborts the whole build with
# UnsupportedGraphShapeError. Jagged sequences (a list of lists) are rank 1
# sequences whose elements are themselves sequences, not rank 2.
MAX_SEQUENCE_RANK: int = 1

# ============================================================================
# INTROSPECTION
# ============================================================================

# Runtime types treated as value types when a dataclass field carries no
# explicit ownership marker. Values of these types never produce edges.
# datetime is a subclass of date and is covered by it.
VALUE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    bytearray,
    Enum,
    date,
    time,
    timedelta,
    UUID,
)

# Key under which ownership markers store their MemberDescriptor in
# dataclasses.field(metadata=...).
OWNERSHIP_METADATA_KEY: str = "ownergraph.member"
