"""Tests for HTML parsing and selector-based page transforms."""

import pytest

from apidoc.html_tree import parse_html, serialize_html
from apidoc.project import Project
from apidoc.transform_html import apply_transforms, transform_html

PAGE = "<!DOCTYPE html>\n<html><head></head><body>a<p id=\"x\">b</p>c</body></html>"


def _run(*transforms: tuple[str, ...]) -> str:
    return serialize_html(apply_transforms(parse_html(PAGE), transforms))


def test_round_trip() -> None:
    """Verify a page with no transforms serializes unchanged."""
    assert _run() == PAGE


def test_void_elements_need_no_closing() -> None:
    """Verify unclosed void elements do not swallow their siblings."""
    html = '<html><head><meta charset="UTF-8"><title>t</title></head><body></body></html>'
    root = parse_html(html)
    assert [el.tag for el in root.find("head")] == ["meta", "title"]
    assert serialize_html(root).endswith(html)


def test_append() -> None:
    """Verify append adds markup as the last children."""
    out = _run(("head", "append", '<link rel="stylesheet" href="a.css">'))
    assert '<head><link rel="stylesheet" href="a.css"></head>' in out


def test_prepend() -> None:
    """Verify prepend adds markup before existing content."""
    out = _run(("body", "prepend", "<h1>t</h1>"))
    assert '<body><h1>t</h1>a<p id="x">b</p>c</body>' in out


def test_insert_before_and_after() -> None:
    """Verify markup can be placed around a matched element."""
    out = _run(
        (".//p[@id='x']", "insert-before", "<hr>"),
        (".//p[@id='x']", "insert-after", "<span>s</span>"),
    )
    assert '<body>a<hr><p id="x">b</p><span>s</span>c</body>' in out


def test_replace() -> None:
    """Verify replace swaps the element and keeps the following text."""
    out = _run((".//p[@id='x']", "replace", "<div>new</div>"))
    assert "<body>a<div>new</div>c</body>" in out


def test_replace_with_text() -> None:
    """Verify replacing with bare text joins the surrounding text."""
    out = _run((".//p", "replace", "plain"))
    assert "<body>aplainc</body>" in out


def test_every_match_gets_its_own_copy() -> None:
    """Verify a transform applies to all matching elements."""
    root = parse_html("<html><body><ul><li>1</li><li>2</li></ul></body></html>")
    apply_transforms(root, [(".//li", "append", "<b>!</b>")])
    assert "<li>1<b>!</b></li><li>2<b>!</b></li>" in serialize_html(root)


def test_transforms_apply_in_order() -> None:
    """Verify later transforms see the effect of earlier ones."""
    out = _run(
        ("body", "append", '<div id="late"></div>'),
        (".//div[@id='late']", "append", "<i>x</i>"),
    )
    assert '<div id="late"><i>x</i></div>' in out


def test_no_match_is_noop() -> None:
    """Verify a selector that matches nothing leaves the page alone."""
    assert _run((".//table", "append", "<tr></tr>")) == PAGE


def test_unknown_operation() -> None:
    """Verify unknown operations are rejected."""
    with pytest.raises(ValueError, match="Unknown transform operation: wrap"):
        _run(("body", "wrap", "<div></div>"))


def test_transform_html_uses_project_transforms() -> None:
    """Verify the project's transform list is applied to rendered pages."""
    project = Project(name="p", transforms=(("body", "append", "<footer>f</footer>"),))
    out = transform_html(project, PAGE)
    assert "c<footer>f</footer></body>" in out
