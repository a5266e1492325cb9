"""SomeOtherClass: the usual root type of the analyzed domain."""

from __future__ import annotations

from dataclasses import dataclass

from ownergraph.introspection import strong_ref, strong_refs, value_field, weak_ref
from tests.fixtures.namespace_a import SomeA, SomeB
from tests.fixtures.namespace_b import SomeClass


@dataclass(eq=False)
class SomeOtherClass:
    ref_a: SomeA | None = strong_ref()
    ref_b: SomeB | None = strong_ref()
    weak_ref_a: SomeA | None = weak_ref()
    weak_ref_b: SomeB | None = weak_ref()

    ref_some: SomeClass | None = strong_ref()
    weak_ref_some: SomeClass | None = weak_ref()

    ref_other: SomeOtherClass | None = strong_ref()
    refs_other: list[SomeOtherClass] = strong_refs()
    weak_ref_other: SomeOtherClass | None = weak_ref()

    name: str = value_field(default="")


@dataclass(eq=False)
class SomeGridClass:
    cells: list[list[SomeOtherClass]] = strong_refs(rank=2)
