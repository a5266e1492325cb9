"""Analysis configuration for validate_ownership.

Provides a single frozen dataclass that encapsulates the boundary and the
checks to run, so callers describe one validation run with one typed object.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from ownergraph.graph.boundary import InternalPredicate, any_namespace_predicate

__all__ = ["AnalysisConfig"]


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Immutable configuration for an ownership validation run.

    Attributes:
        internal_prefixes: Dotted namespaces forming the analyzed domain.
            A type is internal when it lies under any of them.
        check_strong_cycles: Run the strong-link cycle detector (default: True).
        check_weak_only: Run the weak-only reachability check (default: True).
        strict_schema: Used when validate_ownership creates its default
            provider; unregistered or non-dataclass internal types raise
            SchemaError instead of being treated as leaves (default: True).

    Example:
        >>> config = AnalysisConfig(internal_prefixes=("app.model",))
        >>> config.predicate()("app.model.Node")
        True
    """

    internal_prefixes: tuple[str, ...]
    check_strong_cycles: bool = True
    check_weak_only: bool = True
    strict_schema: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If no prefix is given or a prefix is blank.
            TypeError: If internal_prefixes is a bare string.
        """
        if isinstance(self.internal_prefixes, str):
            msg = "internal_prefixes must be a tuple of strings, not a single string"
            raise TypeError(msg)
        if not self.internal_prefixes:
            msg = "internal_prefixes must contain at least one namespace"
            raise ValueError(msg)
        for prefix in self.internal_prefixes:
            if not prefix.strip():
                msg = "internal_prefixes must not contain blank entries"
                raise ValueError(msg)

    def predicate(self) -> InternalPredicate:
        """Internal-domain predicate covering every configured namespace."""
        return any_namespace_predicate(*self.internal_prefixes)
