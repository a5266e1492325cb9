"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for graph building and
ownership analysis.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Build errors (unsupported shapes, introspection schema problems)
        2000-2999: Ownership findings (strong cycles, owner-less instances)
    """

    # Build errors (1000-1999)
    UNSUPPORTED_GRAPH_SHAPE = 1001
    UNREGISTERED_TYPE = 1002
    DUPLICATE_MEMBER = 1003
    NOT_A_DATACLASS = 1004
    UNKNOWN_MEMBER = 1005

    # Ownership findings (2000-2999)
    STRONG_CYCLE = 2001
    WEAK_ONLY_INSTANCE = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        type_name: Fully qualified type the diagnostic is about (if any)
        member: Member name the diagnostic is about (if any)
        node_ids: Snapshot node identifiers involved (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    type_name: str | None = None
    member: str | None = None
    node_ids: tuple[int, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_GRAPH_SHAPE]: Member 'grid' of 'app.Board' is a rank-2 sequence
              --> app.Board.grid
              = help: Flatten the member into a one-dimensional sequence

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
