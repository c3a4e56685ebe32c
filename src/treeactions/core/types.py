"""
Core type definitions for the treeactions engine.

This module contains the action-expression tagged union and the enums that
describe invocation modes and selection-merge policies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class MappingMode(Enum):
    """Invocation mode tag handed to every action callback."""

    NORMAL = "n"
    VISUAL = "v"


class SelectMode(Enum):
    """Selection-merge policy declared by an action."""

    REPLACE_SINGLE = "replace_single"  # First supplied item only
    SELECT = "select"  # Union with selection, then consume the selection
    VISUAL = "visual"  # Supplied items verbatim
    KEEP = "keep"  # Union with selection, selection keeps accumulating


@dataclass(frozen=True)
class Leaf:
    """A single action reference with its string arguments."""

    name: str
    args: tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists or a lone string while keeping the leaf immutable
        args = (self.args,) if isinstance(self.args, str) else tuple(self.args)
        object.__setattr__(self, "args", args)

    def __str__(self) -> str:
        """Return the leaf in its `name:arg:arg` configuration form."""
        return ":".join((self.name, *self.args))


@dataclass(frozen=True)
class Sequence:
    """An ordered list of action expressions, nested to arbitrary depth."""

    elements: tuple["ActionExp", ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> "ActionExp":
        return self.elements[index]

    def __iter__(self):
        return iter(self.elements)


ActionExp = Union[Leaf, Sequence]
