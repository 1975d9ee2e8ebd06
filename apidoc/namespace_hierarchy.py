"""Logic for laying out namespaces as a tree in the sidebar."""

from collections.abc import Iterable

from apidoc.hierarchy_node import HierarchyNode


def split_ns(name: str) -> list[str]:
    """Split a namespace name into its dot-separated segments."""
    return name.split(".")


def namespace_parts(name: str) -> list[str]:
    """Return every path prefix of a namespace, e.g. a, a.b, a.b.c."""
    segments = split_ns(name)
    return [".".join(segments[: i + 1]) for i in range(len(segments))]


def namespace_hierarchy(names: Iterable[str]) -> list[HierarchyNode]:
    """Build the rows of the nested namespace list.

    Ancestors that are not namespaces themselves get rows too, so every
    namespace hangs off a visible parent. ``height`` is how many rows the
    connector below a node has to cross before reaching its next sibling or
    its parent's level; ``branch`` says whether the very next row is a
    sibling.
    """
    rows: list[str] = []
    seen: set[str] = set()
    for name in sorted(names):
        for part in namespace_parts(name):
            if part not in seen:
                seen.add(part)
                rows.append(part)

    depths = [len(split_ns(row)) for row in rows]
    nodes: list[HierarchyNode] = []
    for i, (row, depth) in enumerate(zip(rows, depths)):
        height = 0
        for following in depths[i + 1 :]:
            if following in (depth, depth - 1):
                break
            height += 1
        branch = i + 1 < len(depths) and depths[i + 1] == depth
        nodes.append(HierarchyNode(name=row, depth=depth, height=height, branch=branch))
    return nodes
