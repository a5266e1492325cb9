"""ownergraph exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class OwnerGraphError(Exception):
    """Base exception for all ownergraph errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize OwnerGraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedGraphShapeError(OwnerGraphError):
    """Sequence member with more than one dimension.

    The only fatal analysis condition. The build call that raised it
    returns no snapshot; the analysis run for that root has failed.

    Attributes:
        type_name: Type owning the offending member
        member: Name of the offending member
        rank: Dimensionality reported for the member's value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        type_name: str = "",
        member: str = "",
        rank: int = 0,
    ) -> None:
        """Initialize UnsupportedGraphShapeError.

        Args:
            message: Error message string OR Diagnostic object
            type_name: Type owning the offending member
            member: Name of the offending member
            rank: Dimensionality reported for the member's value
        """
        super().__init__(message)
        self.type_name = type_name
        self.member = member
        self.rank = rank


class SchemaError(OwnerGraphError):
    """Introspection provider cannot describe a type.

    Examples:
    - Internal type with no registered schema (strict registry)
    - Same member name registered twice for one type
    - Non-dataclass instance handed to DataclassIntrospector
    """
