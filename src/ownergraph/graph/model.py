"""Instance graph data model.

Immutable node/edge snapshot produced by the graph builder and consumed by
the ownership checkers. Nodes reference their link targets by identifier,
so a cyclic object graph becomes a plain table of frozen records without
any back-patching.

Key properties:
- Node identifiers are 1-based and follow discovery order
- ``snapshot.nodes[i].id == i + FIRST_NODE_ID`` for every node
- External nodes never carry links
- Frozen dataclasses with slots; nothing changes after build() returns

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ownergraph.constants import FIRST_NODE_ID
from ownergraph.enums import NodeKind, PtrKind

__all__ = [
    "InstanceGraphSnapshot",
    "InstanceNode",
    "PtrLink",
]


@dataclass(frozen=True, slots=True)
class PtrLink:
    """Directed, tagged edge to another node of the same snapshot."""

    kind: PtrKind
    """Ownership tag copied from the member the edge was discovered on."""

    target: int
    """Identifier of the node the edge points to."""

    member: str = ""
    """Member name the edge came from (informational)."""

    @property
    def is_strong(self) -> bool:
        """Whether the edge is an owning reference."""
        return self.kind is PtrKind.STRONG


@dataclass(frozen=True, slots=True)
class InstanceNode:
    """One distinct reachable instance.

    Equality is structural over the recorded fields; identity of the
    underlying instance was already resolved when the identifier was assigned.
    """

    id: int
    """Discovery-order identifier, starting at FIRST_NODE_ID."""

    type_name: str
    """Fully qualified name of the instance's concrete type."""

    kind: NodeKind
    """INTERNAL or EXTERNAL, fixed at first discovery."""

    links: tuple[PtrLink, ...] = ()
    """Outgoing edges in member declaration order, elements in index order."""

    @property
    def is_internal(self) -> bool:
        """Whether the node lies inside the analyzed domain."""
        return self.kind is NodeKind.INTERNAL

    @property
    def strong_links(self) -> tuple[PtrLink, ...]:
        """Outgoing owning edges, in order."""
        return tuple(link for link in self.links if link.kind is PtrKind.STRONG)

    @property
    def weak_links(self) -> tuple[PtrLink, ...]:
        """Outgoing observer edges, in order."""
        return tuple(link for link in self.links if link.kind is PtrKind.WEAK)


@dataclass(frozen=True, slots=True)
class InstanceGraphSnapshot:
    """Result of one builder run: the root plus every discovered node.

    ``nodes`` includes instances reached only through weak links; the
    builder follows every edge regardless of its tag.
    """

    root: InstanceNode
    nodes: tuple[InstanceNode, ...]

    def __post_init__(self) -> None:
        """Validate the identifier table.

        Raises:
            ValueError: If identifiers are not consecutive from FIRST_NODE_ID,
                the root is not part of the table, or a link targets an
                unknown node.
        """
        for index, node in enumerate(self.nodes):
            if node.id != index + FIRST_NODE_ID:
                msg = f"Node at position {index} has id {node.id}, expected {index + FIRST_NODE_ID}"
                raise ValueError(msg)
        if not self._has_id(self.root.id) or self.nodes[self.root.id - FIRST_NODE_ID] != self.root:
            msg = f"Root node {self.root.id} is not part of the snapshot"
            raise ValueError(msg)
        for node in self.nodes:
            for link in node.links:
                if not self._has_id(link.target):
                    msg = f"Node {node.id} links to unknown node {link.target}"
                    raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[InstanceNode]:
        return iter(self.nodes)

    def _has_id(self, node_id: int) -> bool:
        return FIRST_NODE_ID <= node_id < FIRST_NODE_ID + len(self.nodes)

    def node(self, node_id: int) -> InstanceNode:
        """Look up a node by identifier.

        Raises:
            KeyError: If no node has that identifier
        """
        if not self._has_id(node_id):
            raise KeyError(node_id)
        return self.nodes[node_id - FIRST_NODE_ID]

    def targets(self, node: InstanceNode, kind: PtrKind | None = None) -> list[InstanceNode]:
        """Resolve a node's link targets, optionally keeping one tag only.

        Targets are returned once per link, so parallel edges repeat.
        """
        return [
            self.nodes[link.target - FIRST_NODE_ID]
            for link in node.links
            if kind is None or link.kind is kind
        ]

    @property
    def edge_count(self) -> int:
        """Total number of links across all nodes."""
        return sum(len(node.links) for node in self.nodes)
