"""Tests for the nested namespace layout."""

from apidoc.hierarchy_node import HierarchyNode
from apidoc.namespace_hierarchy import namespace_hierarchy, namespace_parts, split_ns


def test_namespace_parts() -> None:
    """Verify every prefix of a namespace is listed in order."""
    assert split_ns("a.b.c") == ["a", "b", "c"]
    assert namespace_parts("a.b.c") == ["a", "a.b", "a.b.c"]
    assert namespace_parts("single") == ["single"]


def test_empty() -> None:
    """Verify no namespaces produce no rows."""
    assert namespace_hierarchy([]) == []


def test_synthetic_parents_are_included() -> None:
    """Verify missing ancestors get rows of their own, once each."""
    nodes = namespace_hierarchy(["x.y.z", "x.y.w"])
    assert [n.name for n in nodes] == ["x", "x.y", "x.y.w", "x.y.z"]


def test_every_prefix_present_and_depth_matches() -> None:
    """Verify completeness and depth for a mixed set of names."""
    names = ["b.c", "a", "a.b.c.d", "b", "a.z"]
    nodes = namespace_hierarchy(names)
    rows = {n.name for n in nodes}
    for name in names:
        assert set(namespace_parts(name)) <= rows
    assert len(rows) == len(nodes)
    for node in nodes:
        assert node.depth == len(node.name.split("."))
        assert node.height >= 0


def test_layout() -> None:
    """Verify depth, height and branch for a small tree."""
    nodes = namespace_hierarchy(["a.b.c", "a.d", "e"])
    assert nodes == [
        HierarchyNode(name="a", depth=1, height=3, branch=False),
        HierarchyNode(name="a.b", depth=2, height=1, branch=False),
        HierarchyNode(name="a.b.c", depth=3, height=0, branch=False),
        HierarchyNode(name="a.d", depth=2, height=0, branch=False),
        HierarchyNode(name="e", depth=1, height=0, branch=False),
    ]


def test_siblings_branch() -> None:
    """Verify siblings continue the connector and the last row does not."""
    nodes = namespace_hierarchy(["p.a", "p.b", "p.c"])
    assert [n.branch for n in nodes] == [False, True, True, False]
    assert [n.height for n in nodes] == [3, 0, 0, 0]


def test_height_zero_before_parent_level() -> None:
    """Verify a node followed by a shallower one has no connector."""
    nodes = namespace_hierarchy(["a.b.c.d", "a.b.e"])
    by_name = {n.name: n for n in nodes}
    assert by_name["a.b.c.d"].height == 0
    assert by_name["a.b.c"].height == 1
    assert by_name["a.b.e"].height == 0


def test_input_order_is_irrelevant() -> None:
    """Verify rows depend only on the set of names."""
    names = ["z.a", "m", "a.b.c", "a"]
    assert namespace_hierarchy(names) == namespace_hierarchy(sorted(names, reverse=True))
