"""
Tests for ActionSource.invoke.

Focus Areas:
1. Selection-merge policies (replace-single, select, visual, keep)
2. Post-effects (reload over render) and their behavior on failure
3. Silent no-op for unresolved actions
"""

import pytest

from treeactions import ActionOptions, MappingMode, SelectMode

pytestmark = pytest.mark.asyncio


class TestUnresolved:
    async def test_unknown_action_is_noop(self, action_source, source, nodes):
        """Test that invoking an unknown name has no effects and does not raise."""
        source.selected_nodes.add(nodes[0])

        await action_source.invoke("missing", nodes)

        assert nodes[0] in source.selected_nodes
        assert source.view.requested == []
        assert source.view.render_count == 0
        assert source.loaded == []


class TestSelectionPolicies:
    """Test how supplied items merge with the selection."""

    async def test_replace_single_uses_first_node(self, action_source, source, nodes, recorder):
        recorder.add("open")
        source.selected_nodes.add(nodes[2])

        await action_source.invoke("open", nodes)

        assert recorder.calls == [("open", ["a.txt"], [])]
        assert list(source.selected_nodes) == [nodes[2]]

    async def test_single_item_is_wrapped(self, action_source, nodes, recorder):
        recorder.add("open")

        await action_source.invoke("open", nodes[1])

        assert recorder.calls == [("open", ["src"], [])]

    async def test_select_consumes_selection(self, action_source, source, nodes, recorder):
        """Test that select passes the union once and then clears the selection."""
        recorder.add("delete", ActionOptions(select=SelectMode.SELECT))
        source.selected_nodes.add(nodes[0])
        source.selected_nodes.add(nodes[2])

        await action_source.invoke("delete", [nodes[1], nodes[0]])

        assert recorder.calls == [("delete", ["src", "a.txt", "b.txt"], [])]
        assert len(source.selected_nodes) == 0
        assert source.view.requested == [[nodes[1], nodes[0], nodes[2]]]

    async def test_select_dedupes_by_identity(self, action_source, source, node_factory, recorder):
        """Test that equal-valued but distinct items are both kept."""
        recorder.add("delete", ActionOptions(select=SelectMode.SELECT))
        first = node_factory("same")
        second = node_factory("same")
        source.selected_nodes.add(first)

        await action_source.invoke("delete", [first, second, first])

        assert len(recorder.contexts[0].nodes) == 2
        assert recorder.contexts[0].nodes[0] is first
        assert recorder.contexts[0].nodes[1] is second

    async def test_visual_passes_nodes_verbatim(self, action_source, source, nodes, recorder):
        recorder.add("yank", ActionOptions(select=SelectMode.VISUAL))
        source.selected_nodes.add(nodes[2])

        await action_source.invoke("yank", nodes[:2], mode=MappingMode.VISUAL)

        assert recorder.calls == [("yank", ["a.txt", "src"], [])]
        assert recorder.contexts[0].mode is MappingMode.VISUAL
        assert list(source.selected_nodes) == [nodes[2]]
        assert source.view.requested == []

    async def test_keep_leaves_selection_accumulating(self, action_source, source, nodes, recorder):
        """Test that keep shows the union but does not touch the selection."""
        recorder.add("copy", ActionOptions(select=SelectMode.KEEP))
        source.selected_nodes.add(nodes[2])

        await action_source.invoke("copy", [nodes[0]])

        assert recorder.calls == [("copy", ["a.txt", "b.txt"], [])]
        assert set(map(id, source.selected_nodes)) == {id(nodes[2])}
        assert source.view.requested == []

    async def test_args_and_source_passed(self, action_source, source, nodes, recorder):
        recorder.add("open")

        await action_source.invoke("open", nodes, ["split", "v"])

        ctx = recorder.contexts[0]
        assert ctx.args == ["split", "v"]
        assert ctx.source is source
        assert ctx.mode is MappingMode.NORMAL

    async def test_sync_callback_supported(self, action_source, nodes):
        seen = []
        action_source.add_action("echo", lambda ctx: seen.append(ctx.nodes))

        await action_source.invoke("echo", nodes)

        assert seen == [[nodes[0]]]


class TestPostEffects:
    """Test reload/render after the callback settles."""

    async def test_reload_from_root(self, action_source, source, nodes, recorder):
        recorder.add("refresh", ActionOptions(reload=True))

        await action_source.invoke("refresh", nodes)

        assert source.loaded == [source.root]
        assert source.view.render_count == 0

    async def test_render(self, action_source, source, nodes, recorder):
        recorder.add("toggle", ActionOptions(render=True))

        await action_source.invoke("toggle", nodes)

        assert source.view.render_count == 1
        assert source.loaded == []

    async def test_reload_wins_over_render(self, action_source, source, nodes, recorder):
        """Test that at most one post-effect runs, reload first."""
        recorder.add("both", ActionOptions(reload=True, render=True))

        await action_source.invoke("both", nodes)

        assert source.loaded == [source.root]
        assert source.view.render_count == 0

    async def test_post_effect_runs_after_failure(self, action_source, source, nodes, recorder):
        """Test that a failing callback still reloads, then re-raises unchanged."""
        error = RuntimeError("disk full")
        recorder.add("paste", ActionOptions(reload=True), fail=error)

        with pytest.raises(RuntimeError) as exc_info:
            await action_source.invoke("paste", nodes)

        assert exc_info.value is error
        assert source.loaded == [source.root]

    async def test_post_effect_waits_for_callback(self, action_source, source, nodes):
        order = []

        async def callback(ctx):
            order.append(("callback", source.view.render_count))

        action_source.add_action("touch", callback, options=ActionOptions(render=True))

        await action_source.invoke("touch", nodes)

        assert order == [("callback", 0)]
        assert source.view.render_count == 1
