"""Data models for the sidebar namespace tree."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HierarchyNode:
    """One row of the nested namespace list."""

    name: str
    depth: int  # number of dot-separated segments
    height: int  # rows spanned by the connector line below this node
    branch: bool  # next row is a sibling
