"""Ownership validation for object models.

Provides a one-call validation run over a root instance: build the
snapshot, run the enabled checks, and collect the findings into a
ValidationResult that tooling (CI jobs, porting scripts) can report.

Architecture:
    - validate_ownership(): Main entry point, orchestrates validation passes
    - _build(): Pass 1 - Build the snapshot, convert shape failures to errors
    - _check_strong_cycles(): Pass 2 - Strong-link cycle detection
    - _check_weak_only(): Pass 3 - Owner-less instance detection

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ownergraph.analysis import has_strong_cycle, weak_only_nodes
from ownergraph.config import AnalysisConfig
from ownergraph.diagnostics import (
    ErrorTemplate,
    UnsupportedGraphShapeError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from ownergraph.graph import InstanceGraphBuilder, InstanceGraphSnapshot
from ownergraph.introspection import DataclassIntrospector, TypeIntrospector

__all__ = ["OwnershipReport", "validate_ownership"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OwnershipReport:
    """Outcome of one validation run.

    Attributes:
        snapshot: Built snapshot (None when root was None or the build failed)
        result: Collected errors and warnings
        has_strong_cycle: Cycle check outcome (None when skipped or not run)
        has_weak_only_components: Reachability outcome (None when skipped or not run)
    """

    snapshot: InstanceGraphSnapshot | None
    result: ValidationResult
    has_strong_cycle: bool | None = None
    has_weak_only_components: bool | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the run produced no errors."""
        return self.result.is_valid


def _build(
    builder: InstanceGraphBuilder, root: object | None
) -> tuple[InstanceGraphSnapshot | None, list[ValidationError]]:
    """Build the snapshot, turning an unsupported shape into a validation error."""
    try:
        return builder.build(root), []
    except UnsupportedGraphShapeError as e:
        logger.error("Cannot build instance graph: %s", e)
        return None, [
            ValidationError(
                code="unsupported-graph-shape",
                message=e.diagnostic.message if e.diagnostic else str(e),
                context=f"{e.type_name}.{e.member}",
            )
        ]


def _check_strong_cycles(snapshot: InstanceGraphSnapshot) -> tuple[bool, list[ValidationError]]:
    """Run the cycle detector and describe a positive result."""
    if not has_strong_cycle(snapshot):
        return False, []
    diagnostic = ErrorTemplate.strong_cycle()
    return True, [ValidationError(code="strong-cycle", message=diagnostic.message)]


def _check_weak_only(snapshot: InstanceGraphSnapshot) -> tuple[bool, list[ValidationWarning]]:
    """Run the reachability check and emit one warning per owner-less node."""
    warnings: list[ValidationWarning] = []
    for node in weak_only_nodes(snapshot):
        diagnostic = ErrorTemplate.weak_only_instance(node.id, node.type_name)
        warnings.append(
            ValidationWarning(
                code="weak-only-instance",
                message=diagnostic.message,
                context=f"#{node.id} {node.type_name}",
            )
        )
    return bool(warnings), warnings


def validate_ownership(
    root: object | None,
    config: AnalysisConfig,
    *,
    introspector: TypeIntrospector | None = None,
) -> OwnershipReport:
    """Validate the ownership annotations of everything reachable from root.

    Findings:
        - unsupported-graph-shape (error): multi-dimensional sequence member;
          no snapshot, no further checks
        - strong-cycle (error): strong links form a cycle
        - weak-only-instance (warning): one per instance with no owning path

    Args:
        root: Root instance (None yields an empty, valid report)
        config: Boundary and enabled checks
        introspector: Member provider (default: DataclassIntrospector honouring
            config.strict_schema)

    Returns:
        OwnershipReport with the snapshot, the check outcomes, and the result

    Raises:
        SchemaError: If the provider cannot describe an internal type

    Example:
        >>> report = validate_ownership(document, AnalysisConfig(("app.model",)))
        >>> if not report.is_valid:
        ...     print(report.result.format())
    """
    if introspector is None:
        introspector = DataclassIntrospector(strict=config.strict_schema)
    builder = InstanceGraphBuilder(config.predicate(), introspector)

    snapshot, errors = _build(builder, root)
    if snapshot is None:
        return OwnershipReport(
            snapshot=None,
            result=ValidationResult(errors=tuple(errors), warnings=()),
        )

    warnings: list[ValidationWarning] = []
    cycle_found: bool | None = None
    weak_only_found: bool | None = None

    if config.check_strong_cycles:
        cycle_found, cycle_errors = _check_strong_cycles(snapshot)
        errors.extend(cycle_errors)

    if config.check_weak_only:
        weak_only_found, weak_warnings = _check_weak_only(snapshot)
        warnings.extend(weak_warnings)

    logger.debug(
        "Validated ownership of %s: %d error(s), %d warning(s)",
        snapshot.root.type_name,
        len(errors),
        len(warnings),
    )

    return OwnershipReport(
        snapshot=snapshot,
        result=ValidationResult(errors=tuple(errors), warnings=tuple(warnings)),
        has_strong_cycle=cycle_found,
        has_weak_only_components=weak_only_found,
    )
