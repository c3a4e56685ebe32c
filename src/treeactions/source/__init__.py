"""
Collaborator interfaces for explorer data sources and views.
"""

from treeactions.source.protocols import ExplorerSource, ExplorerView

__all__ = ["ExplorerSource", "ExplorerView"]
