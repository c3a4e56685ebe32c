"""
Core treeactions components.

This package provides the fundamental building blocks of the engine:
expression types, selection handling and the item base class.
"""

from treeactions.core.selection import SelectionSet, uniq
from treeactions.core.tree_node import TreeNode
from treeactions.core.types import (
    ActionExp,
    Leaf,
    MappingMode,
    SelectMode,
    Sequence,
)

__all__ = [
    "TreeNode",
    "SelectionSet",
    "uniq",
    "ActionExp",
    "Leaf",
    "Sequence",
    "MappingMode",
    "SelectMode",
]
