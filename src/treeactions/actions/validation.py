"""
Structural validation of action expressions.
"""

from treeactions.actions.rules import CONDITION_RULES
from treeactions.core.types import ActionExp, Leaf
from treeactions.exceptions import MalformedExpressionError


def validate_expression(exp: ActionExp) -> None:
    """
    Check that every condition router is followed by two branch elements.

    Walks the expression the same way the interpreter does, so the branches
    of a router are checked as expressions of their own.

    Params:
        exp: Expression to check, recursively

    Raises:
        MalformedExpressionError: For the first router missing a branch
    """
    if isinstance(exp, Leaf):
        return

    i = 0
    while i < len(exp):
        element = exp[i]
        if isinstance(element, Leaf) and element.name in CONDITION_RULES:
            branches = exp.elements[i + 1 : i + 3]
            if len(branches) < 2:
                raise MalformedExpressionError(element.name, len(branches))
            for branch in branches:
                validate_expression(branch)
            i += 3
            continue
        validate_expression(element)
        i += 1
