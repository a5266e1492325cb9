"""ownergraph - Ownership-annotation validation for object graphs.

Checks an object model's strong/weak (owning/observer) annotations before
the model is ported from a garbage-collected representation to explicit
shared-ownership and observer pointers. Builds an identity-deduplicated
snapshot of everything reachable from a root and runs two structural checks.

Public API:
    InstanceGraphBuilder - Snapshot builder for one internal domain
    build_snapshot - One-shot builder call
    has_strong_cycle - Strong-link cycle detector
    has_weak_only_components - Weak-only reachability checker
    validate_ownership - Build + checks + structured findings
    AnalysisConfig - Configuration for validate_ownership
    namespace_predicate - Dotted-prefix internal-domain boundary

Exceptions:
    OwnerGraphError - Base exception class
    UnsupportedGraphShapeError - Multi-dimensional sequence member
    SchemaError - Introspection provider cannot describe a type

Submodules:
    ownergraph.graph - Snapshot model, builder, boundary predicates
    ownergraph.analysis - Cycle and reachability checks
    ownergraph.introspection - SchemaRegistry and dataclass field markers
    ownergraph.diagnostics - Error types, diagnostics, validation results
"""

# Essential Public API - Minimal exports for clean namespace
from .analysis import has_strong_cycle, has_weak_only_components
from .config import AnalysisConfig
from .diagnostics import OwnerGraphError, SchemaError, UnsupportedGraphShapeError
from .enums import NodeKind, PtrKind
from .graph import (
    InstanceGraphBuilder,
    InstanceGraphSnapshot,
    InstanceNode,
    PtrLink,
    build_snapshot,
    namespace_predicate,
)
from .validation import OwnershipReport, validate_ownership

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("ownergraph")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnalysisConfig",
    "InstanceGraphBuilder",
    "InstanceGraphSnapshot",
    "InstanceNode",
    "NodeKind",
    "OwnerGraphError",
    "OwnershipReport",
    "PtrKind",
    "PtrLink",
    "SchemaError",
    "UnsupportedGraphShapeError",
    "__version__",
    "build_snapshot",
    "has_strong_cycle",
    "has_weak_only_components",
    "namespace_predicate",
    "validate_ownership",
]
