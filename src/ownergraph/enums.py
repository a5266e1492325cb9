"""Enumerations for ownergraph type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PtrKind(StrEnum):
    """Ownership tag of a reference edge.

    StrEnum provides automatic string conversion: str(PtrKind.STRONG) == "strong"
    """

    STRONG = "strong"
    """Owning reference (shared-ownership pointer). The default for every member."""

    WEAK = "weak"
    """Non-owning observer reference. Only present when explicitly marked."""


class NodeKind(StrEnum):
    """Classification of an instance against the internal-domain boundary.

    StrEnum provides automatic string conversion: str(NodeKind.INTERNAL) == "internal"
    """

    INTERNAL = "internal"
    """Instance type lies inside the analyzed domain; its members are expanded."""

    EXTERNAL = "external"
    """Instance type lies outside the analyzed domain; recorded as an opaque leaf."""


class Multiplicity(StrEnum):
    """Shape of a reference member.

    StrEnum provides automatic string conversion: str(Multiplicity.SINGLE) == "single"
    """

    SINGLE = "single"
    """Member holds one reference (or None)."""

    SEQUENCE = "sequence"
    """Member holds a homogeneous ordered collection of references."""


__all__ = [
    "Multiplicity",
    "NodeKind",
    "PtrKind",
]
