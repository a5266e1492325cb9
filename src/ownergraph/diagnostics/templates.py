"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unsupported_graph_shape(type_name: str, member: str, rank: int) -> Diagnostic:
        """Sequence member has more than one dimension.

        Args:
            type_name: Fully qualified type owning the member
            member: Member name
            rank: Dimensionality of the member's value

        Returns:
            Diagnostic for UNSUPPORTED_GRAPH_SHAPE
        """
        msg = f"Member '{member}' of '{type_name}' is a rank-{rank} sequence"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_GRAPH_SHAPE,
            message=msg,
            hint="Only one-dimensional sequence members can be modelled; "
            "flatten the member or split it into a sequence of row objects",
            type_name=type_name,
            member=member,
        )

    @staticmethod
    def unregistered_type(type_name: str) -> Diagnostic:
        """Internal instance whose type has no registered schema.

        Args:
            type_name: Fully qualified type name

        Returns:
            Diagnostic for UNREGISTERED_TYPE
        """
        msg = f"No member schema registered for internal type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNREGISTERED_TYPE,
            message=msg,
            hint="Register the type with SchemaRegistry.register() or narrow the "
            "internal-domain prefix",
            type_name=type_name,
        )

    @staticmethod
    def duplicate_member(type_name: str, member: str) -> Diagnostic:
        """Same member name registered twice for one type.

        Args:
            type_name: Fully qualified type name
            member: Duplicated member name

        Returns:
            Diagnostic for DUPLICATE_MEMBER
        """
        msg = f"Member '{member}' registered more than once for '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MEMBER,
            message=msg,
            hint="Each member may appear only once in a type schema",
            type_name=type_name,
            member=member,
        )

    @staticmethod
    def unknown_member(type_name: str, member: str) -> Diagnostic:
        """Registered member that the instance does not have.

        Args:
            type_name: Fully qualified type name
            member: Registered member name

        Returns:
            Diagnostic for UNKNOWN_MEMBER
        """
        msg = f"Instance of '{type_name}' has no attribute '{member}' named in its schema"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_MEMBER,
            message=msg,
            hint="Check the member name in the registered schema; assign every "
            "registered attribute in __init__, even if only to None",
            type_name=type_name,
            member=member,
        )

    @staticmethod
    def not_a_dataclass(type_name: str) -> Diagnostic:
        """Internal instance that DataclassIntrospector cannot describe.

        Args:
            type_name: Fully qualified type name

        Returns:
            Diagnostic for NOT_A_DATACLASS
        """
        msg = f"Internal type '{type_name}' is not a dataclass"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_DATACLASS,
            message=msg,
            hint="Decorate the type with @dataclass or describe it with a SchemaRegistry",
            type_name=type_name,
        )

    @staticmethod
    def strong_cycle() -> Diagnostic:
        """Strong-link subgraph contains a directed cycle.

        Returns:
            Diagnostic for STRONG_CYCLE
        """
        return Diagnostic(
            code=DiagnosticCode.STRONG_CYCLE,
            message="Strong references form a cycle; the instances in it can never be released",
            hint="Mark at least one back reference in the cycle as weak",
        )

    @staticmethod
    def weak_only_instance(node_id: int, type_name: str) -> Diagnostic:
        """Instance not reachable from the root through strong references.

        Args:
            node_id: Snapshot identifier of the instance
            type_name: Fully qualified type name of the instance

        Returns:
            Diagnostic for WEAK_ONLY_INSTANCE
        """
        msg = f"Instance #{node_id} of '{type_name}' has no owning path from the root"
        return Diagnostic(
            code=DiagnosticCode.WEAK_ONLY_INSTANCE,
            message=msg,
            hint="Give the instance an owner: make one of the references to it strong",
            type_name=type_name,
            node_ids=(node_id,),
            severity="warning",
        )
