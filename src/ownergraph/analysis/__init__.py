"""Ownership checks over instance graph snapshots.

Provides the strong-link cycle detector and the weak-only reachability
checker. Both are pure functions over an immutable snapshot and can run
independently in any order.

Python 3.13+.
"""

from .cycles import has_strong_cycle
from .reachability import has_weak_only_components, strongly_reachable_ids, weak_only_nodes

__all__ = [
    "has_strong_cycle",
    "has_weak_only_components",
    "strongly_reachable_ids",
    "weak_only_nodes",
]
