"""Internal consistency errors for schema diff analysis.

The analyzer trusts its inputs: the edit operations and the vertex mapping
come from the graph matching engine, which guarantees the labelling and
pairing conventions the analysis relies on. When one of those guarantees
turns out not to hold, the analysis aborts with the error defined here
instead of producing a partial report.
"""

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from .edit_operations import EditOperation


class InternalConsistencyError(Exception):
    """Raised when the upstream graph/matching contract is violated.

    Raised when:
    - An edge label lacks the expected ``type=`` prefix
    - No deletion can be paired with an inserted field or argument type edge
    - A difference record of the wrong kind is found for a name
    - A structurally unreachable classification branch is reached
    - One type name would need two records of the same kind, e.g. old
      types A and B where A is renamed to B and the old B is deleted

    The last case is a known limit of the one-record-per-name report, not a
    matcher bug: such edit scripts cannot be analyzed.
    """

    def __init__(self, message: str, operation: "EditOperation | None" = None):
        """Initialize internal consistency error.

        Args:
            message: Human-readable description of the violated invariant
            operation: Optional edit operation being classified when it happened
        """
        super().__init__(message)
        self.operation = operation

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation is not None:
            return f"{message} (while handling {self.operation})"
        return message


def assert_true(
    condition: bool, message: str, operation: "EditOperation | None" = None
) -> None:
    """Raise InternalConsistencyError unless condition holds."""
    if not condition:
        raise InternalConsistencyError(message, operation)


def assert_should_never_happen(
    message: str = "should never happen", operation: "EditOperation | None" = None
) -> NoReturn:
    """Abort on a branch the upstream contract makes unreachable."""
    raise InternalConsistencyError(message, operation)
