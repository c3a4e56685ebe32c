"""
treeactions exception classes.

This package provides all exception types used throughout treeactions for
consistent error handling and reporting.
"""

from treeactions.exceptions.core import (
    BarrierTimeoutError,
    DuplicateActionError,
    ExpressionParseError,
    InvalidMenuError,
    MalformedExpressionError,
    TreeActionsError,
)

__all__ = [
    "TreeActionsError",
    "DuplicateActionError",
    "ExpressionParseError",
    "InvalidMenuError",
    "MalformedExpressionError",
    "BarrierTimeoutError",
]
