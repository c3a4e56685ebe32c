"""
Exception classes for treeactions.

This module defines specific exception types for the error conditions that
can occur while registering actions, parsing action expressions and running
them. Failures raised by action callbacks are never wrapped: they propagate
to the caller unchanged.
"""


class TreeActionsError(Exception):
    """Base exception for all treeactions-related errors."""

    pass


class DuplicateActionError(TreeActionsError):
    """Raised when an action name is registered twice in the same table."""

    def __init__(self, name: str, table: str):
        """
        Initialize the exception.

        Params:
            name: The action name that is already registered
            table: Which table rejected it ("local" or "global")
        """
        self.name = name
        self.table = table
        super().__init__(f"Action '{name}' is already registered in the {table} table")


class ExpressionParseError(TreeActionsError):
    """Raised when a configured action expression cannot be parsed."""

    def __init__(self, value: object, reason: str):
        """
        Initialize the exception.

        Params:
            value: The configuration value that failed to parse
            reason: Why the value was rejected
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid action expression {value!r}: {reason}")


class InvalidMenuError(TreeActionsError):
    """Raised when an action's menu declaration has an unsupported entry."""

    def __init__(self, entry: object, reason: str):
        """
        Initialize the exception.

        Params:
            entry: The menu entry that was rejected
            reason: Why the entry was rejected
        """
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid action menu entry {entry!r}: {reason}")


class MalformedExpressionError(TreeActionsError):
    """Raised when a condition router is not followed by both of its branches."""

    def __init__(self, router: str, found: int):
        """
        Initialize the exception.

        Params:
            router: Name of the condition router leaf
            found: How many branch elements actually follow it (0 or 1)
        """
        self.router = router
        self.found = found
        super().__init__(
            f"Condition '{router}' needs a true and a false branch, found {found}"
        )


class BarrierTimeoutError(TreeActionsError):
    """Raised when the synchronization barrier is not acquired in time."""

    def __init__(self, timeout: float):
        """
        Initialize the exception.

        Params:
            timeout: Seconds waited before giving up
        """
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout}s waiting for the action barrier")
