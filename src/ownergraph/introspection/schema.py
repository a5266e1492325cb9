"""Explicit per-type member schemas.

A SchemaRegistry maps each internal type to the ordered list of members the
builder should follow, together with their shape and ownership tag. The
caller registers every internal type once; no reflection is involved.

Example:
    >>> registry = SchemaRegistry()
    >>> registry.register(Node, strong("next"), weak("parent"), strong_seq("children"))
    >>> builder = InstanceGraphBuilder(namespace_predicate("app.model"), registry)

Inheritance:
    Members registered for a base class are inherited by every subclass.
    They come first (base-to-derived along the reversed MRO), followed by
    the subclass's own members in registration order. A subclass may
    redeclare an inherited member to change its tag or shape; the
    redeclaration keeps the base member's position.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ownergraph.diagnostics import ErrorTemplate, SchemaError
from ownergraph.enums import Multiplicity, PtrKind

from .base import BaseIntrospector, MemberDescriptor, qualified_type_name

__all__ = [
    "SchemaRegistry",
    "strong",
    "strong_seq",
    "value",
    "weak",
    "weak_seq",
]

logger = logging.getLogger(__name__)

_MISSING = object()


# ==============================================================================
# DESCRIPTOR FACTORIES
# ==============================================================================


def strong(name: str) -> MemberDescriptor:
    """Single owning reference."""
    return MemberDescriptor(name)


def weak(name: str) -> MemberDescriptor:
    """Single non-owning reference."""
    return MemberDescriptor(name, ownership=PtrKind.WEAK)


def strong_seq(name: str, *, rank: int = 1) -> MemberDescriptor:
    """Sequence whose elements are all owned."""
    return MemberDescriptor(name, multiplicity=Multiplicity.SEQUENCE, rank=rank)


def weak_seq(name: str, *, rank: int = 1) -> MemberDescriptor:
    """Sequence whose elements are all observed, not owned."""
    return MemberDescriptor(
        name, multiplicity=Multiplicity.SEQUENCE, ownership=PtrKind.WEAK, rank=rank
    )


def value(name: str) -> MemberDescriptor:
    """Value-typed member, listed for completeness and never followed."""
    return MemberDescriptor(name, value_type=True)


# ==============================================================================
# REGISTRY
# ==============================================================================


class SchemaRegistry(BaseIntrospector):
    """Statically registered member tables, one per type.

    Thread Safety:
        Registration and schema resolution are guarded by a lock. Resolved
        member tables are immutable tuples shared across builds.

    Attributes:
        strict: Raise SchemaError for an internal instance whose type has no
            schema anywhere in its MRO, or that lacks an attribute its schema
            names. When False, the type is treated as having no members (or the
            attribute as unset) and a warning is logged once.
    """

    __slots__ = ("_lock", "_resolved", "_schemas", "_warned", "_warned_members", "strict")

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict
        self._schemas: dict[type, tuple[MemberDescriptor, ...]] = {}
        self._resolved: dict[type, tuple[MemberDescriptor, ...] | None] = {}
        self._warned: set[type] = set()
        self._warned_members: set[tuple[type, str]] = set()
        self._lock = threading.Lock()

    def register(self, cls: type, *members: MemberDescriptor) -> None:
        """Register the members of a type.

        Registering a type again replaces its previous schema.

        Args:
            cls: Type to describe
            *members: Member descriptors in declaration order

        Raises:
            SchemaError: If a member name appears twice
        """
        seen: set[str] = set()
        for member in members:
            if member.name in seen:
                raise SchemaError(
                    ErrorTemplate.duplicate_member(qualified_type_name(cls), member.name)
                )
            seen.add(member.name)

        with self._lock:
            self._schemas[cls] = tuple(members)
            # Subclass resolutions may include this type's members
            self._resolved.clear()
        logger.debug(
            "Registered schema for %s: %d member(s)", qualified_type_name(cls), len(members)
        )

    def schema(self, *members: MemberDescriptor) -> Callable[[type], type]:
        """Class decorator form of register().

        Example:
            >>> @registry.schema(strong("next"), weak("prev"))
            ... class Link: ...
        """

        def decorator(cls: type) -> type:
            self.register(cls, *members)
            return cls

        return decorator

    def is_registered(self, cls: type) -> bool:
        """Whether the type or one of its bases has a schema."""
        return self._resolve(cls) is not None

    def members(self, instance: object) -> tuple[MemberDescriptor, ...]:
        """Return the resolved member table of the instance's type.

        Raises:
            SchemaError: If no schema covers the type and the registry is strict
        """
        cls = type(instance)
        resolved = self._resolve(cls)
        if resolved is not None:
            return resolved

        if self.strict:
            raise SchemaError(ErrorTemplate.unregistered_type(qualified_type_name(cls)))

        if cls not in self._warned:
            self._warned.add(cls)
            logger.warning(
                "No schema registered for internal type %s; treating it as a leaf",
                qualified_type_name(cls),
            )
        return ()

    def member_value(self, instance: object, member: MemberDescriptor) -> object | None:
        """Read a registered member from the instance.

        A member that is present but None is unset. A member the instance
        does not have at all means the schema names an attribute that does
        not exist.

        Raises:
            SchemaError: If the attribute is missing and the registry is strict
        """
        current = getattr(instance, member.name, _MISSING)
        if current is not _MISSING:
            return current

        cls = type(instance)
        if self.strict:
            raise SchemaError(ErrorTemplate.unknown_member(qualified_type_name(cls), member.name))

        key = (cls, member.name)
        if key not in self._warned_members:
            self._warned_members.add(key)
            logger.warning(
                "Instance of %s has no attribute %r named in its schema; skipping it",
                qualified_type_name(cls),
                member.name,
            )
        return None

    def _resolve(self, cls: type) -> tuple[MemberDescriptor, ...] | None:
        """Merge the schemas along the MRO, base-to-derived, and cache the result."""
        with self._lock:
            if cls in self._resolved:
                return self._resolved[cls]

            merged: dict[str, MemberDescriptor] = {}
            found = False
            for klass in reversed(cls.__mro__):
                own = self._schemas.get(klass)
                if own is None:
                    continue
                found = True
                for member in own:
                    merged[member.name] = member

            result = tuple(merged.values()) if found else None
            self._resolved[cls] = result
            return result
