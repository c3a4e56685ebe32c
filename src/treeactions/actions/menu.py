"""
Sub-menu variants declared by actions.

An action may offer preset argument lists ("menus") that a listing UI shows
as `<action>:<args>` entries next to the bare action.
"""

from collections.abc import Mapping
from typing import Any

from attrs import frozen

from treeactions.exceptions import InvalidMenuError

MenuSpec = Mapping[str, str] | list["str | Mapping[str, str] | ActionMenu"] | tuple["ActionMenu", ...]


@frozen
class ActionMenu:
    description: str
    args: str

    @property
    def action_args(self) -> list[str]:
        """Arguments passed to the callback when this menu entry is chosen."""
        return self.args.split(":") if self.args else []

    @classmethod
    def normalize(cls, menus: MenuSpec | None) -> list["ActionMenu"]:
        """
        Normalize the accepted menu declaration forms into `ActionMenu` items.

        Accepted forms:
          - mapping of args string to description: {"split:v": "vertical split"}
          - list of args strings, used as their own description: ["split:v"]
          - list of mappings with "args" and optional "description" keys
          - `ActionMenu` items, kept as they are

        Params:
            menus: Menu declaration from the action options, or None

        Returns:
            Menu items in declaration order

        Raises:
            InvalidMenuError: When an entry has an unsupported shape
        """
        if not menus:
            return []
        if isinstance(menus, Mapping):
            return [cls(description=desc, args=args) for args, desc in menus.items()]

        result = []
        for menu in menus:
            if isinstance(menu, ActionMenu):
                result.append(menu)
            elif isinstance(menu, str):
                result.append(cls(description=menu, args=menu))
            elif isinstance(menu, Mapping) and "args" in menu:
                result.append(
                    cls(description=menu.get("description", menu["args"]), args=menu["args"])
                )
            else:
                raise InvalidMenuError(menu, "entries need an 'args' string")
        return result


def to_menus(value: Any) -> tuple[ActionMenu, ...]:
    """attrs converter storing normalized menus on `ActionOptions`."""
    return tuple(ActionMenu.normalize(value))
