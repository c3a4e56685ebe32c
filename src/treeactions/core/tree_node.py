"""
Core TreeNode base class for treeactions.

This module contains a convenience base model for explorer items. The engine
never requires it: any object can be acted upon, and only its identity and
selection state matter.
"""

from pydantic import BaseModel


class TreeNode(BaseModel):
    """
    Base class for explorer tree items.

    Carries the attributes the built-in condition routers read. Instances
    are compared by identity inside selections, never by field values.
    """

    id: str
    name: str = ""
    fullpath: str | None = None
    expandable: bool = False
