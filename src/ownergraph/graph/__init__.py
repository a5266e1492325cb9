"""Instance graph model and builder.

Exports:
    InstanceGraphBuilder: Reusable, identity-deduplicating snapshot builder
    build_snapshot: One-shot builder call
    InstanceGraphSnapshot, InstanceNode, PtrLink: Immutable snapshot model
    namespace_predicate, any_namespace_predicate: Internal-domain boundaries

Python 3.13+.
"""

from .boundary import InternalPredicate, any_namespace_predicate, namespace_predicate
from .builder import InstanceGraphBuilder, build_snapshot
from .model import InstanceGraphSnapshot, InstanceNode, PtrLink

__all__ = [
    "InstanceGraphBuilder",
    "InstanceGraphSnapshot",
    "InstanceNode",
    "InternalPredicate",
    "PtrLink",
    "any_namespace_predicate",
    "build_snapshot",
    "namespace_predicate",
]
