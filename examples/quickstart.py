"""Quickstart example for ownergraph.

This example demonstrates annotating a small object model with strong and
weak references and checking the annotations before a port to explicit
shared-ownership pointers.

Note: Types defined in a script live in the ``__main__`` module, so the
internal domain below is the ``__main__`` namespace.
"""

from __future__ import annotations

from dataclasses import dataclass

from ownergraph import AnalysisConfig, build_snapshot, namespace_predicate, validate_ownership
from ownergraph.diagnostics import DiagnosticFormatter
from ownergraph.introspection import SchemaRegistry, strong, strong_refs, value_field, weak, weak_ref


@dataclass(eq=False)
class TreeNode:
    name: str = value_field(default="")
    children: list[TreeNode] = strong_refs()
    parent: TreeNode | None = weak_ref()


def make_tree() -> TreeNode:
    root = TreeNode("root")
    for label in ("left", "right"):
        child = TreeNode(label, parent=root)
        root.children.append(child)
    return root


config = AnalysisConfig(internal_prefixes=("__main__",))
formatter = DiagnosticFormatter()

# Example 1: Valid ownership
print("=" * 50)
print("Example 1: Strong children, weak parent")
print("=" * 50)

tree = make_tree()
report = validate_ownership(tree, config)
assert report.snapshot is not None
print(formatter.format_snapshot(report.snapshot))
print(report.result.format())
# Output: Validation passed: no errors or warnings

# Example 2: Strong cycle
print("\n" + "=" * 50)
print("Example 2: Parent marked strong by mistake")
print("=" * 50)

tree = make_tree()
tree.children[0].children.append(tree)
report = validate_ownership(tree, config)
print(report.result.format())
# Output: Errors (1): [strong-cycle] ...

# Example 3: Instance with no owner
print("\n" + "=" * 50)
print("Example 3: Node reachable only through a weak reference")
print("=" * 50)

tree = make_tree()
orphan = TreeNode("orphan")
tree.children[1].parent = orphan
report = validate_ownership(tree, config)
print(formatter.format_validation_result(report.result))
# Output: Validation passed ... Warnings: [weak-only-instance] ...

# Example 4: Plain classes described by a schema registry
print("\n" + "=" * 50)
print("Example 4: SchemaRegistry")
print("=" * 50)

registry = SchemaRegistry()


@registry.schema(strong("head"), weak("tail"))
class LinkedList:
    def __init__(self) -> None:
        self.head: Cell | None = None
        self.tail: Cell | None = None


@registry.schema(strong("next"), weak("prev"))
class Cell:
    def __init__(self) -> None:
        self.next: Cell | None = None
        self.prev: Cell | None = None


items = LinkedList()
first, second = Cell(), Cell()
first.next, second.prev = second, first
items.head, items.tail = first, second

snapshot = build_snapshot(items, namespace_predicate("__main__"), registry)
assert snapshot is not None
print(formatter.format_snapshot(snapshot))
report = validate_ownership(items, config, introspector=registry)
print(report.result.format())
# Output: Validation passed: no errors or warnings
