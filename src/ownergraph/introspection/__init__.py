"""Type-introspection providers for the graph builder.

This package provides the contract the builder consumes and two providers:

1. Explicit schemas (ownergraph.introspection.schema):
   - SchemaRegistry with per-type member tables
   - Descriptor factories: strong, weak, strong_seq, weak_seq, value

2. Dataclass fields (ownergraph.introspection.fields):
   - DataclassIntrospector reading dataclasses.fields()
   - Field markers: strong_ref, weak_ref, strong_refs, weak_refs, value_field

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .base import BaseIntrospector, MemberDescriptor, TypeIntrospector, qualified_type_name
from .fields import (
    DataclassIntrospector,
    strong_ref,
    strong_refs,
    value_field,
    weak_ref,
    weak_refs,
)
from .schema import SchemaRegistry, strong, strong_seq, value, weak, weak_seq

__all__ = [
    # Contract
    "BaseIntrospector",
    "MemberDescriptor",
    "TypeIntrospector",
    "qualified_type_name",
    # Explicit schemas
    "SchemaRegistry",
    "strong",
    "strong_seq",
    "value",
    "weak",
    "weak_seq",
    # Dataclass fields
    "DataclassIntrospector",
    "strong_ref",
    "strong_refs",
    "value_field",
    "weak_ref",
    "weak_refs",
]
