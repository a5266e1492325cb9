"""End-to-end ownership scenarios over the fixture domain.

Builds snapshots for hand-wired object graphs and checks the exact node
tables together with both checker results. The internal domain is
``tests.fixtures.namespace_b.other`` unless a test says otherwise.
"""

from __future__ import annotations

import pytest

from ownergraph import (
    InstanceGraphSnapshot,
    NodeKind,
    PtrKind,
    UnsupportedGraphShapeError,
    build_snapshot,
    has_strong_cycle,
    has_weak_only_components,
    namespace_predicate,
)
from ownergraph.analysis import weak_only_nodes
from tests.fixtures.namespace_a import SomeA, SomeB
from tests.fixtures.namespace_b import SomeClass
from tests.fixtures.namespace_b.other import SomeGridClass, SomeOtherClass
from tests.fixtures.namespace_b.other.another import SomeAnotherClass

OTHER = namespace_predicate("tests.fixtures.namespace_b.other")

S = PtrKind.STRONG
W = PtrKind.WEAK
I = NodeKind.INTERNAL  # noqa: E741
E = NodeKind.EXTERNAL

_OTHER_NAME = "tests.fixtures.namespace_b.other.SomeOtherClass"


def _snapshot(root: object, is_internal=OTHER) -> InstanceGraphSnapshot:
    snapshot = build_snapshot(root, is_internal)
    assert snapshot is not None
    return snapshot


def _table(snapshot: InstanceGraphSnapshot) -> list[tuple[NodeKind, list[tuple[PtrKind, int]]]]:
    return [
        (node.kind, [(link.kind, link.target) for link in node.links])
        for node in snapshot.nodes
    ]


# ============================================================================
# BASIC SCENARIOS
# ============================================================================


class TestBasicScenarios:
    """Small graphs with known answers."""

    def test_strong_self_reference(self) -> None:
        """A owns itself: strong cycle of length one."""
        a = SomeOtherClass()
        a.ref_other = a
        snapshot = _snapshot(a)
        assert has_strong_cycle(snapshot) is True
        assert has_weak_only_components(snapshot) is False

    def test_strong_forward_weak_back(self) -> None:
        """A -> B strong, B -> A weak: valid ownership."""
        a, b = SomeOtherClass(), SomeOtherClass()
        a.ref_other = b
        b.weak_ref_other = a
        snapshot = _snapshot(a)
        assert _table(snapshot) == [(I, [(S, 2)]), (I, [(W, 1)])]
        assert has_strong_cycle(snapshot) is False
        assert has_weak_only_components(snapshot) is False

    def test_weak_cycle_only(self) -> None:
        """A <-> B weak both ways: no cycle, B has no owner."""
        a, b = SomeOtherClass(), SomeOtherClass()
        a.weak_ref_other = b
        b.weak_ref_other = a
        snapshot = _snapshot(a)
        assert has_strong_cycle(snapshot) is False
        assert has_weak_only_components(snapshot) is True
        assert [node.id for node in weak_only_nodes(snapshot)] == [2]

    def test_children_with_weak_parent(self) -> None:
        """A owns [B, C]; B observes A."""
        a, b, c = SomeOtherClass(), SomeOtherClass(), SomeOtherClass()
        a.refs_other = [b, c]
        b.weak_ref_other = a
        snapshot = _snapshot(a)
        assert _table(snapshot) == [(I, [(S, 2), (S, 3)]), (I, [(W, 1)]), (I, [])]
        assert has_strong_cycle(snapshot) is False
        assert has_weak_only_components(snapshot) is False

    def test_strong_cycle_through_sequences(self) -> None:
        """A -> [B, C], B -> [C], C -> [A]: strong cycle A -> B -> C -> A."""
        a, b, c = SomeOtherClass(), SomeOtherClass(), SomeOtherClass()
        a.refs_other = [b, c]
        b.refs_other = [c]
        c.refs_other = [a]
        snapshot = _snapshot(a)
        assert has_strong_cycle(snapshot) is True
        assert has_weak_only_components(snapshot) is False

    def test_two_dimensional_member(self) -> None:
        """Rank-2 member fails the whole build."""
        grid = SomeGridClass(cells=[[SomeOtherClass()]])
        with pytest.raises(UnsupportedGraphShapeError) as exc_info:
            build_snapshot(grid, OTHER)
        assert exc_info.value.member == "cells"

    def test_simple_strong_pair(self) -> None:
        """Two instances owning each other."""
        first, second = SomeOtherClass(), SomeOtherClass()
        first.ref_other = second
        second.ref_other = first
        snapshot = _snapshot(first)
        assert _table(snapshot) == [(I, [(S, 2)]), (I, [(S, 1)])]
        assert has_strong_cycle(snapshot) is True

    def test_nested_namespace_is_internal(self) -> None:
        """SomeAnotherClass lives under the boundary namespace."""
        first, second = SomeAnotherClass(), SomeAnotherClass()
        first.weak_ref_another = second
        second.weak_ref_another = first
        snapshot = _snapshot(first)
        assert [node.kind for node in snapshot.nodes] == [I, I]
        assert has_strong_cycle(snapshot) is False
        assert has_weak_only_components(snapshot) is True


# ============================================================================
# COMPLEX GRAPH
# ============================================================================


class TestComplexGraph:
    """Four mutually referencing instances of one internal type."""

    @pytest.fixture
    def root(self) -> SomeOtherClass:
        o1, o2, o3, o4 = (SomeOtherClass(name=f"o{i}") for i in range(1, 5))
        o1.refs_other = [o2, o3]
        o2.weak_ref_other = o1
        o2.ref_other = o4
        o3.ref_other = o1
        o3.weak_ref_other = o3
        o3.refs_other = [o4]
        o4.refs_other = [o1, o2]
        return o1

    def test_node_table(self, root: SomeOtherClass) -> None:
        """Discovery order and link tags are exact."""
        snapshot = _snapshot(root)
        assert _table(snapshot) == [
            (I, [(S, 2), (S, 4)]),
            (I, [(S, 3), (W, 1)]),
            (I, [(S, 1), (S, 2)]),
            (I, [(S, 1), (S, 3), (W, 4)]),
        ]
        assert {node.type_name for node in snapshot.nodes} == {_OTHER_NAME}

    def test_checks(self, root: SomeOtherClass) -> None:
        """Strong cycle present, every node owned."""
        snapshot = _snapshot(root)
        assert has_strong_cycle(snapshot) is True
        assert has_weak_only_components(snapshot) is False

    def test_mixed_types(self) -> None:
        """SomeAnotherClass graph reaching into SomeOtherClass instances."""
        o1, o2, o4 = SomeOtherClass(), SomeOtherClass(), SomeOtherClass()
        a1, a2, a3, a4 = (SomeAnotherClass() for _ in range(4))
        a1.ref_another = a2
        a1.weak_ref_another = a3
        a1.ref_other = o1
        a2.refs_another = [a3, a4]
        a2.weak_ref_other = o2
        a3.weak_ref_other = o4
        a3.weak_ref_another = a1
        a4.ref_other = o2
        a4.ref_another = a1

        snapshot = _snapshot(a1)
        # a1=1, o1=2, a2=3, o2=4, a3=5, o4=6, a4=7
        assert _table(snapshot) == [
            (I, [(S, 2), (S, 3), (W, 5)]),
            (I, []),
            (I, [(W, 4), (S, 5), (S, 7)]),
            (I, []),
            (I, [(W, 6), (W, 1)]),
            (I, []),
            (I, [(S, 4), (S, 1)]),
        ]
        assert has_strong_cycle(snapshot) is True
        assert [node.id for node in weak_only_nodes(snapshot)] == [6]


# ============================================================================
# EXTERNAL OBJECTS
# ============================================================================


class TestExternalObjects:
    """Graphs whose foreign part is richly connected."""

    @pytest.fixture
    def foreign(self) -> dict[str, object]:
        a1, a2, a3 = SomeA(), SomeA(), SomeA()
        b1, b2, b3 = SomeB(), SomeB(), SomeB()
        a1.refs_a = [a2, a3]
        a1.weak_ref_b = b1
        a2.weak_ref_a = a1
        a2.refs_b = [b1, b3]
        a3.ref_a = a1
        a3.weak_ref_a = a2
        a3.refs_b = [b2]
        b1.ref_a = a3
        b1.weak_ref_b = b2
        b2.refs_b = [b3]
        b3.refs_a = [a1, a2, a3]
        s1, s2, s3 = SomeClass(), SomeClass(), SomeClass()
        s1.refs_some = [s2]
        s1.weak_ref_some = s3
        s1.ref_a = a2
        s1.weak_ref_b = b3
        s2.refs_some = [s1, s3]
        s2.weak_ref_some = s2
        s3.ref_a = a1
        s3.weak_ref_a = a3
        s3.ref_b = b2
        s3.weak_ref_b = b2
        return {
            "a1": a1, "a2": a2, "a3": a3,
            "b1": b1, "b2": b2, "b3": b3,
            "s1": s1, "s2": s2, "s3": s3,
        }

    def test_other_root(self, foreign: dict[str, object]) -> None:
        """Foreign targets are external leaves; weakly held ones are unowned."""
        root = SomeOtherClass(
            ref_a=foreign["a3"],  # type: ignore[arg-type]
            weak_ref_a=foreign["a1"],  # type: ignore[arg-type]
            ref_b=foreign["b2"],  # type: ignore[arg-type]
            weak_ref_b=foreign["b3"],  # type: ignore[arg-type]
            ref_some=foreign["s1"],  # type: ignore[arg-type]
            weak_ref_some=foreign["s3"],  # type: ignore[arg-type]
        )
        snapshot = _snapshot(root)
        assert _table(snapshot) == [
            (I, [(S, 2), (S, 3), (W, 4), (W, 5), (S, 6), (W, 7)]),
            (E, []),
            (E, []),
            (E, []),
            (E, []),
            (E, []),
            (E, []),
        ]
        assert has_strong_cycle(snapshot) is False
        assert [node.id for node in weak_only_nodes(snapshot)] == [4, 5, 7]

    def test_another_root(self, foreign: dict[str, object]) -> None:
        """Same foreign graph seen from SomeAnotherClass."""
        root = SomeAnotherClass(
            ref_a=foreign["a2"],  # type: ignore[arg-type]
            weak_ref_a=foreign["a1"],  # type: ignore[arg-type]
            ref_b=foreign["b3"],  # type: ignore[arg-type]
            weak_ref_b=foreign["b1"],  # type: ignore[arg-type]
            ref_some=foreign["s2"],  # type: ignore[arg-type]
            weak_ref_some=foreign["s1"],  # type: ignore[arg-type]
        )
        snapshot = _snapshot(root)
        assert len(snapshot) == 7
        assert all(node.links == () for node in snapshot.nodes[1:])
        assert [node.id for node in weak_only_nodes(snapshot)] == [4, 5, 7]

    def test_wider_boundary_expands_some_class(self, foreign: dict[str, object]) -> None:
        """With namespace_b internal, SomeClass instances are expanded."""
        snapshot = _snapshot(foreign["s1"], namespace_predicate("tests.fixtures.namespace_b"))
        # s1=1, a2=2, b3=3, s2=4, s3=5, a1=6, b2=7, a3=8
        assert _table(snapshot) == [
            (I, [(S, 2), (W, 3), (S, 4), (W, 5)]),
            (E, []),
            (E, []),
            (I, [(S, 1), (S, 5), (W, 4)]),
            (I, [(S, 6), (S, 7), (W, 8), (W, 7)]),
            (E, []),
            (E, []),
            (E, []),
        ]
        assert has_strong_cycle(snapshot) is True
        assert [node.id for node in weak_only_nodes(snapshot)] == [3, 8]
