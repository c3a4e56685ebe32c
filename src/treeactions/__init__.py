"""
treeactions - action-expression execution for tree explorers

treeactions runs user-triggered commands (nested sequences of named actions,
condition routers and synchronization markers) against a selection of tree
items, applying each action's selection and reload/render policy.
"""

from importlib.metadata import version

from treeactions.actions import (
    Action,
    ActionContext,
    ActionOptions,
    ActionSource,
    GlobalActionRegistrar,
)
from treeactions.core import Leaf, MappingMode, SelectionSet, SelectMode, Sequence, TreeNode
from treeactions.parsing import parse_action_exp

__version__ = version("treeactions")

__all__ = [
    "__version__",
    "Action",
    "ActionContext",
    "ActionOptions",
    "ActionSource",
    "GlobalActionRegistrar",
    "Leaf",
    "MappingMode",
    "SelectionSet",
    "SelectMode",
    "Sequence",
    "TreeNode",
    "parse_action_exp",
]
