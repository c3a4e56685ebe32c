"""
Global action registrar shared by all data sources.
"""

from typing import TYPE_CHECKING

from treeactions.actions.barrier import Barrier
from treeactions.actions.registry import ActionRegistry

if TYPE_CHECKING:
    from treeactions.config import Settings


class GlobalActionRegistrar:
    """Owns the global action table and the barrier every source serializes on.

    Injected into each `ActionSource` so that `wait` markers serialize across
    the whole explorer rather than per source.
    """

    def __init__(self, barrier: Barrier | None = None):
        self.registry = ActionRegistry(table="global")
        self.barrier = barrier or Barrier()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GlobalActionRegistrar":
        return cls(barrier=Barrier(timeout=settings.barrier_timeout))

    @property
    def actions(self):
        return self.registry.actions

    def add_action(self, *args, **kwargs):
        return self.registry.add_action(*args, **kwargs)

    def action(self, *args, **kwargs):
        return self.registry.action(*args, **kwargs)
