"""
Per-source action execution: the expression interpreter and the invoker.

`ActionSource.run` walks an action expression, handing condition routers to
the rule table, `wait` markers to the shared barrier and leaves to
`ActionSource.invoke`, which applies the action's selection policy, calls
it and then reloads or re-renders the source.
"""

import inspect
import logging
from collections.abc import Sequence as SequenceABC
from typing import Any

from attrs import frozen

from treeactions.actions.barrier import Release
from treeactions.actions.explorer import GlobalActionRegistrar
from treeactions.actions.registry import (
    Action,
    ActionCallback,
    ActionContext,
    ActionOptions,
    ActionRegistry,
)
from treeactions.actions.rules import WAIT_ACTION, ConditionRule, get_condition_rule, partition
from treeactions.actions.validation import validate_expression
from treeactions.core.selection import uniq
from treeactions.core.types import ActionExp, Leaf, MappingMode, SelectMode, Sequence
from treeactions.exceptions import MalformedExpressionError
from treeactions.source.protocols import ExplorerSource

logger = logging.getLogger(__name__)

# The listing UI's own entry point is never listed
ACTION_MENU_NAME = "actionMenu"


@frozen
class ActionListItem:
    """One presentable entry of `ActionSource.list_actions`."""

    name: str
    action: str
    description: str
    args: tuple[str, ...] = ()


async def _settle(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class ActionSource:
    """Runs action expressions on behalf of one explorer data source.

    Params:
        owner: The data source whose items and selection actions operate on
        global_registrar: Registrar holding global actions and the shared barrier
    """

    def __init__(self, owner: ExplorerSource, global_registrar: GlobalActionRegistrar):
        self.source = owner
        self.global_registrar = global_registrar
        self.registry = ActionRegistry(table="local")

    def add_action(
        self,
        name: str,
        callback: ActionCallback,
        description: str = "",
        options: ActionOptions | None = None,
    ) -> Action:
        """Register an action local to this source, shadowing any global one."""
        return self.registry.add_action(name, callback, description, options)

    def registered_actions(self) -> dict[str, Action]:
        """Merged mapping of global and local actions, local entries winning."""
        return {**self.global_registrar.actions, **self.registry.actions}

    def resolve(self, name: str) -> Action | None:
        """
        Resolve an action name, preferring the local table over the global one.

        Params:
            name: Action name

        Returns:
            The matching `Action`, or None when neither table defines it
        """
        return self.registry.get(name) or self.global_registrar.registry.get(name)

    async def run(
        self,
        exp: ActionExp,
        nodes: list[Any],
        mode: MappingMode = MappingMode.NORMAL,
        is_sub_action: bool = False,
    ) -> None:
        """
        Interpret an action expression against `nodes`.

        Sequence elements run strictly in order. A `wait` marker takes the
        shared barrier for the rest of a top-level run; nested runs never
        take it. A condition router consumes the next two elements as its
        true and false branches and skips a branch with no items.

        Params:
            exp: Expression to run
            nodes: Items the expression acts on
            mode: Invocation mode passed through to every callback
            is_sub_action: True for recursive calls made by the interpreter

        Raises:
            MalformedExpressionError: When a condition router misses a branch;
                top-level runs detect this before anything is executed
            Exception: Any callback failure, after the barrier is released
        """
        if not is_sub_action:
            validate_expression(exp)

        release: Release | None = None
        try:
            if isinstance(exp, Sequence):
                i = 0
                while i < len(exp):
                    element = exp[i]

                    if isinstance(element, Sequence):
                        await self.run(element, nodes, mode, is_sub_action=True)
                    elif element.name == WAIT_ACTION.name:
                        if release is None and not is_sub_action:
                            release = await self.global_registrar.barrier.acquire()
                    else:
                        rule = get_condition_rule(element.name)
                        if rule:
                            await self._route(rule, element, exp.elements[i + 1 : i + 3], nodes, mode)
                            i += 2
                        else:
                            await self.run(element, nodes, mode, is_sub_action=True)
                    i += 1
            else:
                await self.invoke(exp.name, nodes, exp.args, mode)
        finally:
            if release is not None:
                release()

    async def _route(
        self,
        rule: ConditionRule,
        router: Leaf,
        branches: tuple[ActionExp, ...],
        nodes: list[Any],
        mode: MappingMode,
    ) -> None:
        if len(branches) < 2:
            raise MalformedExpressionError(router.name, len(branches))

        true_branch, false_branch = branches
        true_nodes, false_nodes = partition(
            nodes, lambda node: rule.filter(self.source, node, router.args)
        )
        logger.debug(
            "Condition %r routed %d node(s) to true, %d to false",
            router.name,
            len(true_nodes),
            len(false_nodes),
        )
        if true_nodes:
            await self.run(true_branch, true_nodes, mode, is_sub_action=True)
        if false_nodes:
            await self.run(false_branch, false_nodes, mode, is_sub_action=True)

    async def invoke(
        self,
        name: str,
        nodes: Any,
        args: SequenceABC[str] = (),
        mode: MappingMode = MappingMode.NORMAL,
    ) -> None:
        """
        Invoke one action against a set of items.

        Unknown names are a silent no-op. Reload or render post-effects run
        even when the callback raises; the failure is re-raised afterwards.

        Params:
            name: Action name to resolve
            nodes: A list of items, or a single item
            args: String arguments for the callback
            mode: Invocation mode tag
        """
        action = self.resolve(name)
        if action is None:
            logger.debug("Action %r is not registered, skipping", name)
            return

        final_nodes = list(nodes) if isinstance(nodes, (list, tuple)) else [nodes]
        options = action.options
        source = self.source

        try:
            if options.select is SelectMode.SELECT:
                callback_nodes = uniq([*final_nodes, *source.selected_nodes])
                source.selected_nodes.clear()
                source.view.request_render_nodes(callback_nodes)
            elif options.select is SelectMode.KEEP:
                callback_nodes = uniq([*final_nodes, *source.selected_nodes])
            elif options.select is SelectMode.VISUAL:
                callback_nodes = final_nodes
            else:
                callback_nodes = final_nodes[:1]

            await _settle(
                action.callback(
                    ActionContext(source=source, nodes=callback_nodes, args=list(args), mode=mode)
                )
            )
        finally:
            if options.reload:
                logger.debug("Reloading source after action %r", name)
                await _settle(source.load(source.view.root_node))
            elif options.render:
                logger.debug("Rendering view after action %r", name)
                await _settle(source.view.render())

    def list_actions(self) -> list[ActionListItem]:
        """
        List resolvable actions for presentation, sorted by name.

        Every menu variant of an action adds an `<action>:<args>` entry right
        after the action itself.

        Returns:
            Listing entries; running one means `invoke(item.action, nodes, item.args)`
        """
        items: list[ActionListItem] = []
        actions = self.registered_actions()
        for name in sorted(actions):
            if name == ACTION_MENU_NAME:
                continue
            action = actions[name]
            items.append(ActionListItem(name=name, action=name, description=action.description))
            for menu in action.options.menus:
                items.append(
                    ActionListItem(
                        name=f"{name}:{menu.args}",
                        action=name,
                        description=f"{action.description} {menu.description}",
                        args=tuple(menu.action_args),
                    )
                )
        return items
