"""
treeactions action components.

This package provides the action registries, the reserved marker and
condition routers, the shared barrier, and the per-source interpreter.
"""

from treeactions.actions.barrier import Barrier
from treeactions.actions.explorer import GlobalActionRegistrar
from treeactions.actions.menu import ActionMenu
from treeactions.actions.registry import (
    Action,
    ActionContext,
    ActionOptions,
    ActionRegistry,
)
from treeactions.actions.rules import (
    CONDITION_RULES,
    WAIT_ACTION,
    ConditionRule,
    get_condition_rule,
    partition,
)
from treeactions.actions.source import ActionListItem, ActionSource
from treeactions.actions.validation import validate_expression

__all__ = [
    "Action",
    "ActionContext",
    "ActionListItem",
    "ActionMenu",
    "ActionOptions",
    "ActionRegistry",
    "ActionSource",
    "Barrier",
    "CONDITION_RULES",
    "ConditionRule",
    "GlobalActionRegistrar",
    "WAIT_ACTION",
    "get_condition_rule",
    "partition",
    "validate_expression",
]
