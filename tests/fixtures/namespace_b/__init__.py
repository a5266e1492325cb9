"""SomeClass: references into namespace_a plus its own type."""

from __future__ import annotations

from dataclasses import dataclass

from ownergraph.introspection import strong_ref, strong_refs, weak_ref
from tests.fixtures.namespace_a import SomeA, SomeB


@dataclass(eq=False)
class SomeClass:
    ref_a: SomeA | None = strong_ref()
    ref_b: SomeB | None = strong_ref()
    weak_ref_a: SomeA | None = weak_ref()
    weak_ref_b: SomeB | None = weak_ref()

    ref_some: SomeClass | None = strong_ref()
    refs_some: list[SomeClass] = strong_refs()
    weak_ref_some: SomeClass | None = weak_ref()
