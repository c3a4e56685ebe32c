"""
Parser for action expressions supplied by configuration.

Key mappings and menus describe commands as strings and nested lists:

    "open:split:v"                       -> Leaf("open", ("split", "v"))
    ["expandable?", "expand", "open"]    -> Sequence of three leaves
    ["wait", ["toggleSelection", "open"]] -> nested Sequence

This module turns those values into the `Leaf`/`Sequence` tagged union.
"""

from collections.abc import Iterable

from treeactions.core.types import ActionExp, Leaf, Sequence
from treeactions.exceptions import ExpressionParseError

ARG_SEPARATOR = ":"


def parse_leaf(text: str) -> Leaf:
    """
    Parse a `name:arg:arg` string into a leaf.

    Params:
        text: Action reference with optional colon-separated arguments

    Returns:
        The parsed `Leaf`

    Raises:
        ExpressionParseError: When the action name is empty
    """
    name, *args = text.strip().split(ARG_SEPARATOR)
    if not name:
        raise ExpressionParseError(text, "action name is empty")
    return Leaf(name, tuple(args))


def parse_action_exp(value: str | Iterable | ActionExp) -> ActionExp:
    """
    Convert a configuration value into an action expression.

    Params:
        value: A string, a (nested) list of strings, or an already parsed expression

    Returns:
        `Leaf` for strings, `Sequence` for lists

    Raises:
        ExpressionParseError: For empty names or unsupported value types
    """
    if isinstance(value, (Leaf, Sequence)):
        return value
    if isinstance(value, str):
        return parse_leaf(value)
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(parse_action_exp(element) for element in value))
    raise ExpressionParseError(value, f"unsupported type {type(value).__name__}")

