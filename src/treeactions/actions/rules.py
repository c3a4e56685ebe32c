"""
Reserved action names: the synchronization marker and the condition routers.

A condition router leaf splits the current items with its predicate and
routes them into the next two elements of the enclosing sequence.
"""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import frozen

from treeactions.core.types import Leaf

if TYPE_CHECKING:
    from treeactions.source.protocols import ExplorerSource

T = TypeVar("T")

WAIT_ACTION = Leaf("wait")


@frozen
class ConditionRule:
    filter: Callable[["ExplorerSource", Any, tuple[str, ...]], bool]
    description: str


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """
    Split items into those satisfying `predicate` and the rest.

    Params:
        items: Items to split, order is preserved in both groups
        predicate: Per-item decision

    Returns:
        Tuple of (true_items, false_items)
    """
    true_items: list[T] = []
    false_items: list[T] = []
    for item in items:
        (true_items if predicate(item) else false_items).append(item)
    return true_items, false_items


CONDITION_RULES: dict[str, ConditionRule] = {
    "expandable?": ConditionRule(
        filter=lambda source, node, args: bool(getattr(node, "expandable", False)),
        description="node is expandable",
    ),
    "expanded?": ConditionRule(
        filter=lambda source, node, args: source.view.is_expanded(node),
        description="node is expanded",
    ),
    "selected?": ConditionRule(
        filter=lambda source, node, args: node in source.selected_nodes,
        description="node is selected",
    ),
    "root?": ConditionRule(
        filter=lambda source, node, args: node is source.view.root_node,
        description="node is the root node",
    ),
}


def get_condition_rule(name: str) -> ConditionRule | None:
    return CONDITION_RULES.get(name)
