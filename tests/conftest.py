"""
Shared test fixtures and utilities for the treeactions test suite.
"""

import pytest

from treeactions import ActionSource, GlobalActionRegistrar, SelectionSet, TreeNode


class FakeView:
    """In-memory view recording render requests."""

    def __init__(self, root_node):
        self.root_node = root_node
        self.expanded: set[str] = set()
        self.requested: list[list] = []
        self.render_count = 0

    def request_render_nodes(self, nodes):
        self.requested.append(list(nodes))

    async def render(self):
        self.render_count += 1

    def is_expanded(self, node):
        return node.id in self.expanded


class FakeSource:
    """In-memory explorer data source recording reloads."""

    def __init__(self):
        self.root = TreeNode(id="/", name="root", fullpath="/", expandable=True)
        self.view = FakeView(self.root)
        self.selected_nodes = SelectionSet()
        self.loaded: list = []

    async def load(self, node):
        self.loaded.append(node)


def make_node(name: str, expandable: bool = False) -> TreeNode:
    return TreeNode(id=f"/{name}", name=name, fullpath=f"/{name}", expandable=expandable)


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def registrar():
    return GlobalActionRegistrar()


@pytest.fixture
def action_source(source, registrar):
    return ActionSource(source, registrar)


@pytest.fixture
def nodes():
    return [make_node("a.txt"), make_node("src", expandable=True), make_node("b.txt")]


@pytest.fixture
def recorder(action_source):
    """Register recording actions and return the list of (name, node names, args) calls.

    Usage:
        def test_something(action_source, recorder):
            recorder.add("open")
            await action_source.invoke("open", nodes)
            assert recorder.calls == [("open", ["a.txt"], [])]
    """

    class Recorder:
        def __init__(self):
            self.calls: list[tuple[str, list[str], list[str]]] = []
            self.contexts = []

        def add(self, name, options=None, registry=None, fail=None):
            async def callback(ctx):
                self.contexts.append(ctx)
                self.calls.append((name, [node.name for node in ctx.nodes], ctx.args))
                if fail is not None:
                    raise fail

            (registry or action_source).add_action(name, callback, f"{name} action", options)
            return callback

    return Recorder()


@pytest.fixture
def node_factory():
    return make_node


@pytest.fixture
def source_factory():
    return FakeSource
