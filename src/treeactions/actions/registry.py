"""
Registry classes for named actions.

An `ActionRegistry` is one table of actions. Every data source owns a local
table, and the `GlobalActionRegistrar` owns the global one; name resolution
prefers the local entry.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from attrs import field, frozen

from treeactions.actions.menu import ActionMenu, to_menus
from treeactions.core.types import MappingMode, SelectMode
from treeactions.exceptions import DuplicateActionError

if TYPE_CHECKING:
    from treeactions.source.protocols import ExplorerSource

logger = logging.getLogger(__name__)


@frozen
class ActionContext:
    """Everything an action callback receives for one invocation."""

    source: "ExplorerSource"
    nodes: list[Any]
    args: list[str]
    mode: MappingMode


ActionCallback = Callable[[ActionContext], Awaitable[None] | None]


@frozen
class ActionOptions:
    """
    Side-effect policy declared by an action.

    Params:
        select: How supplied items merge with the current selection
        reload: Reload the whole source from its root after the callback
        render: Re-render the view after the callback (ignored when reload is set)
        menus: Preset argument variants offered by listing UIs
    """

    select: SelectMode = SelectMode.REPLACE_SINGLE
    reload: bool = False
    render: bool = False
    menus: tuple[ActionMenu, ...] = field(default=(), converter=to_menus)


@frozen
class Action:
    name: str
    callback: ActionCallback
    description: str = ""
    options: ActionOptions = ActionOptions()


class ActionRegistry:
    """One table of named actions.

    Entries are immutable once registered and a name can only be registered
    once per table; shadowing happens across tables, never within one.
    """

    def __init__(self, table: str = "local"):
        self.table = table
        self.actions: dict[str, Action] = {}

    def add_action(
        self,
        name: str,
        callback: ActionCallback,
        description: str = "",
        options: ActionOptions | None = None,
    ) -> Action:
        """
        Register a new action under `name`.

        Params:
            name: Action name used in expressions and key mappings
            callback: Function or coroutine function receiving an `ActionContext`
            description: Human readable text shown in action listings
            options: Side-effect policy, defaults to `ActionOptions()`

        Returns:
            The registered `Action`

        Raises:
            DuplicateActionError: If `name` already exists in this table
        """
        if name in self.actions:
            raise DuplicateActionError(name, self.table)

        action = Action(
            name=name,
            callback=callback,
            description=description,
            options=options or ActionOptions(),
        )
        self.actions[name] = action
        logger.debug("Registered %s action %r", self.table, name)
        return action

    def action(
        self,
        name: str,
        description: str = "",
        options: ActionOptions | None = None,
    ) -> Callable[[ActionCallback], ActionCallback]:
        """Decorator form of `add_action`."""

        def decorator(callback: ActionCallback) -> ActionCallback:
            self.add_action(name, callback, description, options)
            return callback

        return decorator

    def get(self, name: str) -> Action | None:
        return self.actions.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.actions

    def __len__(self) -> int:
        return len(self.actions)
