"""Unified validation result for ownership validation.

Consolidates all validation feedback from the analysis stages:
- Build-level: Fatal graph-shape errors (no snapshot produced)
- Cycle check: Strong-link cycles (errors)
- Reachability check: Owner-less instances (warnings)

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# ============================================================================
# VALIDATION ERROR & WARNING TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error from ownership validation.

    Attributes:
        code: Error code (e.g., "strong-cycle", "unsupported-graph-shape")
        message: Human-readable error message
        context: Additional context (e.g., the offending type and member)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format error as human-readable string."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from ownership validation.

    Attributes:
        code: Warning code (e.g., "weak-only-instance")
        message: Human-readable warning message
        context: Additional context (e.g., node id and type name)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as human-readable string."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for all validation stages.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Ownership defects and fatal build failures
        warnings: Findings that need a modelling decision by the caller

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result = ValidationResult.invalid(
        ...     errors=(ValidationError(code="strong-cycle", message="cycle"),)
        ... )
        >>> result.error_count
        1
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create a result carrying errors and/or warnings.

        Args:
            errors: Tuple of validation errors (default: empty)
            warnings: Tuple of validation warnings (default: empty)

        Returns:
            ValidationResult with provided errors/warnings
        """
        return ValidationResult(errors=errors, warnings=warnings)

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format()}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
