"""Type-introspection contract consumed by the graph builder.

The builder never inspects instances itself. Everything it needs to know
about a type (its name, its reference members, their shape and ownership
tag) comes through a TypeIntrospector. Two providers ship with the package:

- SchemaRegistry (ownergraph.introspection.schema): explicit per-type
  member tables registered once by the caller
- DataclassIntrospector (ownergraph.introspection.fields): descriptors
  derived from dataclass fields and their ownership markers

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

from ownergraph.constants import VALUE_TYPES
from ownergraph.enums import Multiplicity, PtrKind

__all__ = [
    "BaseIntrospector",
    "MemberDescriptor",
    "TypeIntrospector",
    "qualified_type_name",
]


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    """Immutable description of one member of an internal type.

    Attributes:
        name: Attribute name on the instance (informational in the snapshot)
        multiplicity: SINGLE reference or homogeneous SEQUENCE of references
        ownership: Edge tag applied to the member (to every element for sequences)
        value_type: Member holds a value type; skipped by the builder
        rank: Declared dimensionality of a sequence member
    """

    name: str
    multiplicity: Multiplicity = Multiplicity.SINGLE
    ownership: PtrKind = PtrKind.STRONG
    value_type: bool = False
    rank: int = 1

    def __post_init__(self) -> None:
        """Validate descriptor invariants.

        Raises:
            ValueError: If name is empty or rank is less than 1.
        """
        if not self.name:
            msg = "MemberDescriptor.name must be non-empty"
            raise ValueError(msg)
        if self.rank < 1:
            msg = f"MemberDescriptor.rank must be >= 1, got {self.rank}"
            raise ValueError(msg)

    @property
    def is_sequence(self) -> bool:
        """Whether the member holds a sequence of references."""
        return self.multiplicity is Multiplicity.SEQUENCE


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class TypeIntrospector(Protocol):
    """Protocol for type-introspection providers.

    Defines exactly what the graph builder asks of an instance.
    """

    def type_name(self, instance: object) -> str:
        """Return the fully qualified name of the instance's concrete type."""
        ...

    def members(self, instance: object) -> Iterable[MemberDescriptor]:
        """Return the instance's members in stable declaration order."""
        ...

    def member_value(self, instance: object, member: MemberDescriptor) -> object | None:
        """Return the current value of a member (None when unset)."""
        ...

    def sequence_rank(self, value: object, member: MemberDescriptor) -> int:
        """Return the dimensionality of a sequence member's current value."""
        ...

    def sequence_elements(self, value: object) -> Iterable[object | None]:
        """Return the elements of a sequence value in index order."""
        ...


def qualified_type_name(cls: type) -> str:
    """Fully qualified name of a class: ``module.QualName``.

    Nested classes keep their enclosing class in the path, so the name works
    as a namespace for prefix-based domain boundaries.

    Example:
        >>> qualified_type_name(dict)
        'builtins.dict'
    """
    return f"{cls.__module__}.{cls.__qualname__}"


class BaseIntrospector:
    """Shared behaviour for the shipped providers.

    Subclasses implement members(); type naming, attribute access, and
    sequence handling are common to both.
    """

    __slots__ = ()

    def type_name(self, instance: object) -> str:
        """Return ``module.QualName`` of the instance's concrete type."""
        return qualified_type_name(type(instance))

    def members(self, instance: object) -> Iterable[MemberDescriptor]:
        """Return the instance's members in stable declaration order."""
        raise NotImplementedError

    def member_value(self, instance: object, member: MemberDescriptor) -> object | None:
        """Read the member attribute; a missing attribute counts as unset."""
        return getattr(instance, member.name, None)

    def sequence_rank(self, value: object, member: MemberDescriptor) -> int:
        """Dimensionality of a sequence value.

        Array-protocol objects (memoryview and similar) report their own
        ``ndim``; everything else takes the rank declared on the member.
        """
        ndim = getattr(value, "ndim", None)
        if isinstance(ndim, int):
            return ndim
        return member.rank

    def sequence_elements(self, value: object) -> Iterator[object | None]:
        """Iterate a sequence value in index order.

        Value-typed elements (numbers, strings, enums) carry no ownership and
        are reported as None, which the builder skips.
        """
        if not isinstance(value, Iterable):
            msg = f"Sequence member value of type '{type(value).__name__}' is not iterable"
            raise TypeError(msg)
        for element in value:
            yield None if isinstance(element, VALUE_TYPES) else element
