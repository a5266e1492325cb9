"""Hypothesis strategies for ownergraph property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- graph: Tagged object graphs (edge lists) and their GraphNode materialization

Usage:
    from tests.strategies import ownership_graphs, materialize

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - ownership_graphs
"""

from .graph import GeneratedGraph, materialize, ownership_graphs, ptr_kinds

__all__ = [
    "GeneratedGraph",
    "materialize",
    "ownership_graphs",
    "ptr_kinds",
]
