"""Shared fixtures for building small projects."""

import pytest

from apidoc.namespace_info import NamespaceInfo
from apidoc.project import Project
from apidoc.var_info import VarInfo


@pytest.fixture
def ab_namespace() -> NamespaceInfo:
    """Namespace a.b with a single public var foo."""
    return NamespaceInfo(
        name="a.b",
        doc="The a.b namespace.",
        doc_format="markdown",
        publics=(VarInfo(name="foo", doc="Does foo.", arglists=(("x",),)),),
    )


@pytest.fixture
def simple_project(ab_namespace: NamespaceInfo) -> Project:
    """Single-language project holding a.b and c.d."""
    cd = NamespaceInfo(
        name="c.d",
        publics=(VarInfo(name="bar"), VarInfo(name="foo")),
    )
    return Project(name="demo", version="1.0.0", namespaces=(ab_namespace, cd))
