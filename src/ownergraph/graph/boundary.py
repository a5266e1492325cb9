"""Internal-domain boundary predicates.

The builder classifies every discovered instance by asking a predicate
about its fully qualified type name. Any ``Callable[[str], bool]`` works;
these helpers cover the usual namespace-prefix boundary.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "InternalPredicate",
    "any_namespace_predicate",
    "namespace_predicate",
]

InternalPredicate = Callable[[str], bool]


def _checked_prefix(prefix: str) -> str:
    stripped = prefix.strip().rstrip(".")
    if not stripped:
        msg = f"Namespace prefix must be non-empty, got {prefix!r}"
        raise ValueError(msg)
    return stripped


def namespace_predicate(prefix: str) -> InternalPredicate:
    """Match types inside a dotted namespace.

    A type name matches when it equals the prefix or continues it after a
    dot, so ``"app.model"`` claims ``"app.model.Node"`` and
    ``"app.model.tree.Leaf"`` but not ``"app.models.Node"``.

    Args:
        prefix: Dotted module (or class) path

    Returns:
        Predicate over fully qualified type names

    Raises:
        ValueError: If the prefix is empty or blank

    Example:
        >>> is_internal = namespace_predicate("app.model")
        >>> is_internal("app.model.Node"), is_internal("app.models.Node")
        (True, False)
    """
    namespace = _checked_prefix(prefix)
    dotted = namespace + "."

    def is_internal(type_name: str) -> bool:
        return type_name == namespace or type_name.startswith(dotted)

    return is_internal


def any_namespace_predicate(*prefixes: str) -> InternalPredicate:
    """Match types inside any of several dotted namespaces.

    Raises:
        ValueError: If no prefix is given or one of them is blank
    """
    if not prefixes:
        msg = "At least one namespace prefix is required"
        raise ValueError(msg)
    predicates = tuple(namespace_predicate(prefix) for prefix in prefixes)

    def is_internal(type_name: str) -> bool:
        return any(predicate(type_name) for predicate in predicates)

    return is_internal
