"""Weak-only reachability check.

Answers a modelling question: handed to a strong/weak ownership runtime,
would every discovered instance stay reachable from the root through owning
references alone? An instance reached only through an observer link has no
owner in the proposed model. The check reports such instances; it does not
explain why they are unreached and does not fix anything.

Python 3.13+.
"""

from __future__ import annotations

from ownergraph.constants import FIRST_NODE_ID
from ownergraph.graph.model import InstanceGraphSnapshot, InstanceNode

__all__ = [
    "has_weak_only_components",
    "strongly_reachable_ids",
    "weak_only_nodes",
]


def strongly_reachable_ids(snapshot: InstanceGraphSnapshot) -> frozenset[int]:
    """Identifiers of nodes reachable from the root over STRONG links only.

    The root itself is always included.

    Complexity:
        Time: O(V + E), Space: O(V)
    """
    visited = [False] * len(snapshot.nodes)
    visited[snapshot.root.id - FIRST_NODE_ID] = True
    stack = [snapshot.root]

    while stack:
        node = stack.pop()
        for link in node.links:
            index = link.target - FIRST_NODE_ID
            if link.is_strong and not visited[index]:
                visited[index] = True
                stack.append(snapshot.nodes[index])

    return frozenset(
        index + FIRST_NODE_ID for index, reached in enumerate(visited) if reached
    )


def weak_only_nodes(snapshot: InstanceGraphSnapshot) -> tuple[InstanceNode, ...]:
    """Nodes of the snapshot with no purely strong path from the root.

    Returns:
        Unreached nodes in identifier order (empty when every node is owned)
    """
    reached = strongly_reachable_ids(snapshot)
    return tuple(node for node in snapshot.nodes if node.id not in reached)


def has_weak_only_components(snapshot: InstanceGraphSnapshot) -> bool:
    """Report whether some discovered node is not strongly reachable from the root.

    Args:
        snapshot: Snapshot produced by the graph builder

    Returns:
        True if at least one node is reachable only via weak links
    """
    return len(strongly_reachable_ids(snapshot)) < len(snapshot.nodes)
