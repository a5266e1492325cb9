"""Identity-deduplicated instance graph builder.

Walks a root instance through its internal-domain boundary and records
every reachable instance exactly once, together with the tagged references
between them.

Architecture:
    - InstanceGraphBuilder: Reusable entry point holding the boundary
      predicate and the introspection provider (both immutable)
    - _BuildRun: Per-call state (discovery memo, node table, work stack)
    - _outgoing(): Lazy edge enumeration for one internal instance

Traversal:
    Iterative depth-first walk with an explicit stack of pending edge
    iterators. A target receives its identifier the moment it is first met
    and is expanded before the next member of its parent, which reproduces
    recursive pre-order numbering exactly. Memory and time are O(V + E);
    chain length is limited only by available memory, never by the
    interpreter's recursion limit.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from ownergraph.constants import FIRST_NODE_ID, MAX_SEQUENCE_RANK
from ownergraph.diagnostics import ErrorTemplate, UnsupportedGraphShapeError
from ownergraph.enums import NodeKind, PtrKind
from ownergraph.introspection import DataclassIntrospector, TypeIntrospector

from .boundary import InternalPredicate
from .model import InstanceGraphSnapshot, InstanceNode, PtrLink

__all__ = ["InstanceGraphBuilder", "build_snapshot"]

logger = logging.getLogger(__name__)

# (tag, member name, referenced instance)
_Edge = tuple[PtrKind, str, object]


class InstanceGraphBuilder:
    """Build InstanceGraphSnapshots for roots of one analyzed domain.

    The predicate and provider are fixed for the lifetime of the builder.
    Every build() call allocates its own discovery memo, so a builder can
    be reused for many roots and shared between threads.

    Example:
        >>> builder = InstanceGraphBuilder(namespace_predicate("app.model"))
        >>> snapshot = builder.build(document)
        >>> has_strong_cycle(snapshot)
        False
    """

    __slots__ = ("_introspector", "_is_internal")

    def __init__(
        self,
        is_internal: InternalPredicate,
        introspector: TypeIntrospector | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            is_internal: Boundary test over fully qualified type names
            introspector: Member provider (default: DataclassIntrospector)
        """
        self._is_internal = is_internal
        self._introspector: TypeIntrospector = (
            introspector if introspector is not None else DataclassIntrospector()
        )

    @property
    def introspector(self) -> TypeIntrospector:
        """Provider used to enumerate members of internal instances."""
        return self._introspector

    def build(self, root: object | None) -> InstanceGraphSnapshot | None:
        """Snapshot everything reachable from root.

        Args:
            root: Root instance, or None

        Returns:
            Snapshot of the reachable graph, or None when root is None

        Raises:
            UnsupportedGraphShapeError: If an internal instance holds a
                multi-dimensional sequence member. No snapshot is produced.
            SchemaError: If the provider cannot describe an internal type
        """
        if root is None:
            return None

        run = _BuildRun(self._is_internal, self._introspector)
        snapshot = run.execute(root)
        logger.debug(
            "Built snapshot for %s: %d node(s), %d edge(s)",
            snapshot.root.type_name,
            len(snapshot),
            snapshot.edge_count,
        )
        return snapshot


def build_snapshot(
    root: object | None,
    is_internal: InternalPredicate,
    introspector: TypeIntrospector | None = None,
) -> InstanceGraphSnapshot | None:
    """One-shot form of ``InstanceGraphBuilder(is_internal, introspector).build(root)``."""
    return InstanceGraphBuilder(is_internal, introspector).build(root)


@dataclass(slots=True)
class _BuildRun:
    """Mutable state of a single build() call.

    Attributes:
        is_internal: Boundary predicate
        introspector: Member provider
        memo: id(instance) -> node identifier
        instances: Discovered instances, pinned so id() values stay unique
        type_names: Per-node type name, indexed by id - FIRST_NODE_ID
        kinds: Per-node classification
        links: Per-node outgoing links under construction
    """

    is_internal: InternalPredicate
    introspector: TypeIntrospector
    memo: dict[int, int] = field(default_factory=dict)
    instances: list[object] = field(default_factory=list)
    type_names: list[str] = field(default_factory=list)
    kinds: list[NodeKind] = field(default_factory=list)
    links: list[list[PtrLink]] = field(default_factory=list)

    def execute(self, root: object) -> InstanceGraphSnapshot:
        root_id, _ = self._discover(root)
        stack: list[tuple[int, Iterator[_Edge]]] = []
        if self.kinds[0] is NodeKind.INTERNAL:
            stack.append((root_id, self._outgoing(root, self.type_names[0])))

        while stack:
            node_id, pending = stack[-1]
            edge = next(pending, None)
            if edge is None:
                stack.pop()
                continue

            kind, member, target = edge
            target_id, is_new = self._discover(target)
            self.links[node_id - FIRST_NODE_ID].append(PtrLink(kind, target_id, member))

            index = target_id - FIRST_NODE_ID
            if is_new and self.kinds[index] is NodeKind.INTERNAL:
                stack.append((target_id, self._outgoing(target, self.type_names[index])))

        nodes = tuple(
            InstanceNode(
                id=index + FIRST_NODE_ID,
                type_name=type_name,
                kind=kind,
                links=tuple(links),
            )
            for index, (type_name, kind, links) in enumerate(
                zip(self.type_names, self.kinds, self.links, strict=True)
            )
        )
        return InstanceGraphSnapshot(root=nodes[root_id - FIRST_NODE_ID], nodes=nodes)

    def _discover(self, instance: object) -> tuple[int, bool]:
        """Look up or create the node for an instance.

        Returns:
            Tuple of (node identifier, whether the node was created now)
        """
        key = id(instance)
        existing = self.memo.get(key)
        if existing is not None:
            return existing, False

        node_id = len(self.instances) + FIRST_NODE_ID
        type_name = self.introspector.type_name(instance)
        kind = NodeKind.INTERNAL if self.is_internal(type_name) else NodeKind.EXTERNAL

        self.memo[key] = node_id
        self.instances.append(instance)
        self.type_names.append(type_name)
        self.kinds.append(kind)
        self.links.append([])
        logger.debug("Discovered node %d: %s [%s]", node_id, type_name, kind)
        return node_id, True

    def _outgoing(self, instance: object, type_name: str) -> Iterator[_Edge]:
        """Yield the edges of an internal instance in declaration order.

        Raises:
            UnsupportedGraphShapeError: On a sequence member of rank > 1
        """
        introspector = self.introspector
        for member in introspector.members(instance):
            if member.value_type:
                continue
            current = introspector.member_value(instance, member)
            if current is None:
                continue

            if not member.is_sequence:
                yield member.ownership, member.name, current
                continue

            rank = introspector.sequence_rank(current, member)
            if rank > MAX_SEQUENCE_RANK:
                raise UnsupportedGraphShapeError(
                    ErrorTemplate.unsupported_graph_shape(type_name, member.name, rank),
                    type_name=type_name,
                    member=member.name,
                    rank=rank,
                )
            for element in introspector.sequence_elements(current):
                if element is not None:
                    yield member.ownership, member.name, element
