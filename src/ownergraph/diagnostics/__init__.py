"""Diagnostic system for ownergraph errors and findings.

Provides structured error diagnostics with codes, hints, and formatters.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import OwnerGraphError, SchemaError, UnsupportedGraphShapeError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "OwnerGraphError",
    "SchemaError",
    "UnsupportedGraphShapeError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
