"""Ownership markers for dataclass fields.

Lets a dataclass model carry its ownership annotations next to the field
declarations, the way the model will later read once ported:

    @dataclass
    class Node:
        name: str = ""
        children: list[Node] = strong_refs()
        parent: Node | None = weak_ref()

DataclassIntrospector turns the fields into MemberDescriptors. Every field
is considered, including private (underscore) and init=False fields, in
dataclasses.fields() order, which lists inherited fields first.

Unmarked fields are classified from their current value:
    - instance of VALUE_TYPES -> value-typed, skipped
    - list or tuple -> strong sequence
    - anything else -> single strong reference

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from ownergraph.constants import OWNERSHIP_METADATA_KEY, VALUE_TYPES
from ownergraph.diagnostics import ErrorTemplate, SchemaError
from ownergraph.enums import Multiplicity, PtrKind

from .base import BaseIntrospector, MemberDescriptor, qualified_type_name

__all__ = [
    "DataclassIntrospector",
    "strong_ref",
    "strong_refs",
    "value_field",
    "weak_ref",
    "weak_refs",
]

logger = logging.getLogger(__name__)


def _marked(descriptor: dict[str, Any], **field_kwargs: Any) -> Any:
    """Build a dataclasses.field carrying an ownership marker.

    The marker stores descriptor fields without a name; the introspector
    fills the name in from the dataclass field.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[OWNERSHIP_METADATA_KEY] = descriptor
    return dataclasses.field(metadata=metadata, **field_kwargs)


def strong_ref(**field_kwargs: Any) -> Any:
    """Single owning reference, defaulting to None."""
    field_kwargs.setdefault("default", None)
    return _marked({"multiplicity": Multiplicity.SINGLE}, **field_kwargs)


def weak_ref(**field_kwargs: Any) -> Any:
    """Single non-owning reference, defaulting to None."""
    field_kwargs.setdefault("default", None)
    return _marked(
        {"multiplicity": Multiplicity.SINGLE, "ownership": PtrKind.WEAK}, **field_kwargs
    )


def strong_refs(*, rank: int = 1, **field_kwargs: Any) -> Any:
    """Sequence of owning references, defaulting to an empty list."""
    if "default" not in field_kwargs:
        field_kwargs.setdefault("default_factory", list)
    return _marked({"multiplicity": Multiplicity.SEQUENCE, "rank": rank}, **field_kwargs)


def weak_refs(*, rank: int = 1, **field_kwargs: Any) -> Any:
    """Sequence of non-owning references, defaulting to an empty list."""
    if "default" not in field_kwargs:
        field_kwargs.setdefault("default_factory", list)
    return _marked(
        {"multiplicity": Multiplicity.SEQUENCE, "ownership": PtrKind.WEAK, "rank": rank},
        **field_kwargs,
    )


def value_field(**field_kwargs: Any) -> Any:
    """Value-typed field that never produces edges."""
    return _marked({"value_type": True}, **field_kwargs)


class DataclassIntrospector(BaseIntrospector):
    """Derive member descriptors from dataclass fields.

    Marked fields keep their descriptor regardless of value. Unmarked
    fields are classified per instance from the current value, so the same
    field may yield a reference edge on one instance and be skipped as a
    value on another.

    Attributes:
        strict: Raise SchemaError for an internal instance that is not a
            dataclass. When False, such instances are treated as having no
            members and a warning is logged once per type.
    """

    __slots__ = ("_warned", "strict")

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict
        self._warned: set[type] = set()

    def members(self, instance: object) -> list[MemberDescriptor]:
        """Describe every field of a dataclass instance.

        Raises:
            SchemaError: If the instance is not a dataclass instance (strict mode)
        """
        cls = type(instance)
        if not dataclasses.is_dataclass(instance) or isinstance(instance, type):
            if self.strict:
                raise SchemaError(ErrorTemplate.not_a_dataclass(qualified_type_name(cls)))
            if cls not in self._warned:
                self._warned.add(cls)
                logger.warning(
                    "Internal type %s is not a dataclass; treating it as a leaf",
                    qualified_type_name(cls),
                )
            return []

        members: list[MemberDescriptor] = []
        for fld in dataclasses.fields(instance):
            marker = fld.metadata.get(OWNERSHIP_METADATA_KEY)
            if marker is not None:
                members.append(MemberDescriptor(fld.name, **marker))
                continue
            members.append(self._infer(fld.name, getattr(instance, fld.name, None)))
        return members

    @staticmethod
    def _infer(name: str, current: object) -> MemberDescriptor:
        """Classify an unmarked field from its current value."""
        if isinstance(current, VALUE_TYPES):
            return MemberDescriptor(name, value_type=True)

        match current:
            case list() | tuple():
                return MemberDescriptor(name, multiplicity=Multiplicity.SEQUENCE)
            case _:
                return MemberDescriptor(name)
