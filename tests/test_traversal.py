from abc_analyzer.core.traversal import TraversalLimits, describe, iter_nodes
from abc_analyzer.models import NodeDescriptor, NodeSkipped, TraversalAborted
from fakes import FakeObject


def _tree():
    return FakeObject(
        "ABC",
        children=[
            FakeObject("a", children=[FakeObject("a1"), FakeObject("a2", children=[FakeObject("x")])]),
            FakeObject("b"),
            FakeObject("c", children=[FakeObject("c1")]),
        ],
    )


def _all_paths(obj):
    paths = [obj.getFullName()]
    for child in obj.children:
        paths.extend(_all_paths(child))
    return paths


def _chain(length):
    root = FakeObject("ABC")
    node = root
    for idx in range(length):
        node = node.add(FakeObject(f"n{idx}"))
    return root


def _paths(events):
    return [event.full_name for event in events if isinstance(event, NodeDescriptor)]


def test_describe_projects_header():
    child = FakeObject("mesh", kind="PolyMesh")
    root = FakeObject("ABC", children=[child])
    node = describe(child, parent=root, depth=1)
    assert (node.name, node.full_name, node.metadata, node.depth) == (
        "mesh",
        "/mesh",
        "schema=AbcGeom_PolyMesh_v1",
        1,
    )
    assert node.parent is root


def test_preorder_index_order_visits_each_node_once():
    root = _tree()
    events = list(iter_nodes(root))
    assert all(isinstance(event, NodeDescriptor) for event in events)
    assert _paths(events) == _all_paths(root)
    assert _paths(events) == ["/", "/a", "/a/a1", "/a/a2", "/a/a2/x", "/b", "/c", "/c/c1"]


def test_child_paths_extend_parent_paths():
    by_path = {}
    for node in iter_nodes(_tree()):
        by_path[node.full_name] = node
        if node.parent is not None:
            parent_path = node.parent.getFullName()
            assert node.full_name.startswith(parent_path.rstrip("/") + "/")
            assert by_path[parent_path].depth == node.depth - 1


def test_depth_limit_aborts_traversal():
    events = list(iter_nodes(_chain(20), TraversalLimits(max_depth=5)))
    *visited, last = events
    assert len(visited) == 6
    assert isinstance(last, TraversalAborted)
    assert last.depth == 6
    assert last.full_name == "/n0/n1/n2/n3/n4"
    assert "depth limit 5" in last.reason


def test_deep_chain_does_not_recurse():
    events = list(iter_nodes(_chain(2000), TraversalLimits(max_depth=10_000)))
    assert len(events) == 2001
    assert events[-1].depth == 2000


def test_node_budget_aborts_traversal():
    events = list(iter_nodes(_tree(), TraversalLimits(max_nodes=4)))
    assert _paths(events) == ["/", "/a", "/a/a1", "/a/a2"]
    assert isinstance(events[-1], TraversalAborted)
    assert "node budget 4" in events[-1].reason


def test_duplicate_path_is_skipped_once():
    root = FakeObject("ABC", children=[FakeObject("a", children=[FakeObject("inner")]), FakeObject("a")])
    events = list(iter_nodes(root))
    assert _paths(events) == ["/", "/a", "/a/inner"]
    assert events[-1] == NodeSkipped("/a", "duplicate path")


def test_cycle_terminates():
    root = FakeObject("ABC")
    loop = root.add(FakeObject("loop"))
    loop.children.append(loop)
    events = list(iter_nodes(root))
    assert _paths(events) == ["/", "/loop"]
    assert events[-1] == NodeSkipped("/loop", "duplicate path")


def test_unreadable_children_do_not_stop_siblings():
    root = FakeObject(
        "ABC",
        children=[FakeObject("broken", children_error=RuntimeError("bad child table")), FakeObject("ok")],
    )
    events = list(iter_nodes(root))
    assert _paths(events) == ["/", "/broken", "/ok"]
    assert events[2] == NodeSkipped("/broken", "children unavailable: bad child table")


def test_unreadable_header_is_skipped():
    root = FakeObject(
        "ABC",
        children=[FakeObject("bad", header_error=RuntimeError("truncated header")), FakeObject("ok")],
    )
    events = list(iter_nodes(root))
    assert _paths(events) == ["/", "/ok"]
    assert events[1] == NodeSkipped("/", "unreadable header of child 0: truncated header")


def test_unreadable_headers_count_against_node_budget():
    root = FakeObject(
        "ABC",
        children=[FakeObject(f"bad{idx}", header_error=RuntimeError("truncated header")) for idx in range(1000)],
    )
    events = list(iter_nodes(root, TraversalLimits(max_nodes=3)))
    skipped = [event for event in events if isinstance(event, NodeSkipped)]
    assert len(skipped) == 2
    assert skipped[1].reason == "unreadable header of child 1: truncated header"
    assert isinstance(events[-1], TraversalAborted)
    assert "node budget 3" in events[-1].reason


def test_duplicate_paths_count_against_node_budget():
    root = FakeObject("ABC", children=[FakeObject("a") for _ in range(50)])
    events = list(iter_nodes(root, TraversalLimits(max_nodes=5)))
    assert _paths(events) == ["/", "/a"]
    assert events[2:-1] == [NodeSkipped("/a", "duplicate path")] * 3
    assert isinstance(events[-1], TraversalAborted)
