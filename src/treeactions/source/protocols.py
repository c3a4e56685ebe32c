"""
Interfaces consumed from the data-source and view collaborators.

The engine never renders or loads anything itself; it only calls into these
narrow protocols after an action callback settles.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from treeactions.core.selection import SelectionSet


@runtime_checkable
class ExplorerView(Protocol):
    """Rendering side of an explorer data source."""

    @property
    def root_node(self) -> Any: ...

    def request_render_nodes(self, nodes: Sequence[Any]) -> None:
        """Queue a re-render of the given nodes (e.g. to clear selection marks)."""
        ...

    async def render(self) -> None:
        """Re-render the whole view."""
        ...

    def is_expanded(self, node: Any) -> bool: ...


@runtime_checkable
class ExplorerSource(Protocol):
    """Data source that owns the items, their selection and the view."""

    selected_nodes: SelectionSet

    @property
    def view(self) -> ExplorerView: ...

    async def load(self, node: Any) -> None:
        """Reload the tree starting at `node`."""
        ...
