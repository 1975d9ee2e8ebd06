"""Tests for building projects from configuration."""

from pathlib import Path

import pytest

from apidoc.errors import UnexpectedLanguageError
from apidoc.load_config import load_config
from apidoc.load_project import build_document, build_var, load_project


def test_build_var_with_members() -> None:
    """Verify vars, arglists and members are read from YAML mappings."""
    var = build_var(
        {
            "name": "Shape",
            "type": "protocol",
            "doc": ["Things with area.", "", "More detail."],
            "members": [{"name": "area", "arglists": ["[this]"]}],
            "line": "12",
        },
        "markdown",
    )
    assert var.type == "protocol"
    assert var.doc == "Things with area.\n\nMore detail."
    assert var.doc_format == "markdown"
    assert var.line == 12
    assert var.members[0].name == "area"
    assert var.members[0].arglists == (("this",),)
    assert var.members[0].doc_format == "markdown"


def test_inline_document() -> None:
    """Verify inline documents default to markdown and take their title."""
    doc = build_document({"name": "intro", "content": "# Introduction\n\nHello"}, Path())
    assert doc.title == "Introduction"
    assert doc.format == "markdown"


def test_document_from_file(tmp_path: Path) -> None:
    """Verify documents can be read from files next to the project."""
    (tmp_path / "doc").mkdir()
    (tmp_path / "doc" / "notes.txt").write_text("plain notes", encoding="utf-8")
    doc = build_document({"path": "doc/notes.txt"}, tmp_path)
    assert doc.name == "notes"
    assert doc.title == "notes"
    assert doc.format == "plaintext"
    assert doc.content == "plain notes"


def test_single_language_project(tmp_path: Path) -> None:
    """Verify a flat namespace list is sorted and keeps its defaults."""
    config = load_config(None)
    config.update(
        name="demo",
        version="0.1",
        default_doc_format="markdown",
        namespaces=[
            {"name": "z.last", "publics": [{"name": "f"}]},
            {"name": "a.first", "doc_format": "plaintext"},
        ],
    )
    project = load_project(config, tmp_path)
    assert [ns.name for ns in project.namespaces] == ["a.first", "z.last"]
    assert project.namespaces[0].doc_format == "plaintext"
    assert project.namespaces[1].publics[0].doc_format == "markdown"
    assert not project.cross_platform
    assert project.themes == ("default",)
    assert project.output_path == str(tmp_path / "target/doc")


def test_cross_platform_project() -> None:
    """Verify namespaces keyed by language produce a cross-platform project."""
    config = load_config(None)
    config.update(
        base_language="clojure",
        namespaces={
            "clojurescript": [{"name": "y"}],
            "clojure": [{"name": "x"}, {"name": "y"}],
        },
    )
    project = load_project(config)
    assert project.cross_platform
    assert project.languages == ("clojure", "clojurescript")
    assert [ns.name for ns in project.namespaces_by_language["clojure"]] == ["x", "y"]


def test_single_keyed_language_is_stamped() -> None:
    """Verify a lone non-base language gets suffixed namespaces."""
    config = load_config(None)
    config.update(base_language="clojure", namespaces={"clojurescript": [{"name": "y"}]})
    project = load_project(config)
    assert not project.cross_platform
    assert project.namespaces[0].language == "clojurescript"


def test_unknown_language_rejected() -> None:
    """Verify languages without a known suffix are reported."""
    config = load_config(None)
    config.update(namespaces={"python": [{"name": "m"}]})
    with pytest.raises(UnexpectedLanguageError):
        load_project(config)
