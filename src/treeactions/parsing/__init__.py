"""
treeactions parsing components.

This package provides parsing of action expressions coming from
configuration.
"""

from treeactions.parsing.parser import (
    ARG_SEPARATOR,
    parse_action_exp,
    parse_leaf,
)

__all__ = [
    "ARG_SEPARATOR",
    "parse_action_exp",
    "parse_leaf",
]
