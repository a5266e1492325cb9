"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from ownergraph.graph.model import InstanceGraphSnapshot

    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.strong_cycle()
        >>> print(formatter.format(diagnostic))
        error[STRONG_CYCLE]: Strong references form a cycle; ...
          = help: Mark at least one back reference in the cycle as weak

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        STRONG_CYCLE: Strong references form a cycle; ...
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with summary line, errors, and warnings.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        parts: list[str] = []

        if result.is_valid:
            parts.append("Validation passed")
        else:
            parts.append(
                f"Validation failed: {result.error_count} error(s), "
                f"{result.warning_count} warning(s)"
            )

        if result.errors:
            parts.append("\nErrors:")
            for error in result.errors:
                parts.append(f"  {error.format()}")

        if result.warnings:
            parts.append("\nWarnings:")
            for warning in result.warnings:
                parts.append(f"  {warning.format()}")

        return "\n".join(parts)

    def format_snapshot(self, snapshot: "InstanceGraphSnapshot") -> str:
        """List every node of a snapshot with its strong and weak targets.

        Example output:
            Node 1 [internal] app.model.Document
              strong -> 2, 3
              weak -> 1
            Node 2 [external] builtins.object

        Args:
            snapshot: Snapshot to render

        Returns:
            One block per node, in identifier order
        """
        lines: list[str] = []
        for node in snapshot.nodes:
            lines.append(f"Node {node.id} [{node.kind}] {node.type_name}")
            strong = [str(link.target) for link in node.strong_links]
            if strong:
                lines.append(f"  strong -> {', '.join(strong)}")
            weak = [str(link.target) for link in node.weak_links]
            if weak:
                lines.append(f"  weak -> {', '.join(weak)}")
        return "\n".join(lines)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[WEAK_ONLY_INSTANCE]: Instance #3 of 'app.Leaf' has no owning path from the root
              --> app.Leaf
              = nodes: 3
              = help: Give the instance an owner: make one of the references to it strong
        """
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.type_name and diagnostic.member:
            parts.append(f"  --> {diagnostic.type_name}.{diagnostic.member}")
        elif diagnostic.type_name:
            parts.append(f"  --> {diagnostic.type_name}")

        if diagnostic.node_ids:
            parts.append(f"  = nodes: {', '.join(map(str, diagnostic.node_ids))}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            STRONG_CYCLE: Strong references form a cycle; ...
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "STRONG_CYCLE", "code_value": 2001, "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | list[int] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.type_name:
            data["type_name"] = diagnostic.type_name

        if diagnostic.member:
            data["member"] = diagnostic.member

        if diagnostic.node_ids:
            data["node_ids"] = list(diagnostic.node_ids)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
