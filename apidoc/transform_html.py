"""Apply theme transforms to rendered pages.

A transform is ``(selector, operation, html...)``: every element matching the
ElementTree path ``selector`` has the HTML fragments applied to it with the
named operation.
"""

import copy
import logging
import xml.etree.ElementTree as etree
from collections.abc import Callable, Iterable, Sequence

from apidoc.html_tree import parse_fragment, parse_html, serialize_html
from apidoc.project import Project

logger = logging.getLogger(__name__)

Fragment = tuple[str, list[etree.Element]]


def _fragment(htmls: Sequence[str]) -> Fragment:
    """Parse fragments into leading text plus top-level elements."""
    wrapper = parse_fragment("".join(htmls))
    return wrapper.text or "", list(wrapper)


def _copy(fragment: Fragment) -> Fragment:
    text, nodes = fragment
    return text, [copy.deepcopy(n) for n in nodes]


def _append(parent_map: dict, el: etree.Element, fragment: Fragment) -> None:
    text, nodes = fragment
    if len(el):
        el[-1].tail = (el[-1].tail or "") + text
    else:
        el.text = (el.text or "") + text
    el.extend(nodes)


def _prepend(parent_map: dict, el: etree.Element, fragment: Fragment) -> None:
    text, nodes = fragment
    if nodes:
        nodes[-1].tail = (nodes[-1].tail or "") + (el.text or "")
        el.text = text
    else:
        el.text = text + (el.text or "")
    for i, node in enumerate(nodes):
        el.insert(i, node)


def _insert_before(parent_map: dict, el: etree.Element, fragment: Fragment) -> None:
    parent = parent_map.get(el)
    if parent is None:
        return
    text, nodes = fragment
    index = list(parent).index(el)
    if index == 0:
        parent.text = (parent.text or "") + text
    else:
        prev = parent[index - 1]
        prev.tail = (prev.tail or "") + text
    for offset, node in enumerate(nodes):
        parent.insert(index + offset, node)


def _insert_after(parent_map: dict, el: etree.Element, fragment: Fragment) -> None:
    parent = parent_map.get(el)
    if parent is None:
        return
    text, nodes = fragment
    index = list(parent).index(el)
    tail = el.tail or ""
    if nodes:
        el.tail = text
        nodes[-1].tail = (nodes[-1].tail or "") + tail
    else:
        el.tail = text + tail
    for offset, node in enumerate(nodes, start=1):
        parent.insert(index + offset, node)


def _replace(parent_map: dict, el: etree.Element, fragment: Fragment) -> None:
    parent = parent_map.get(el)
    if parent is None:
        return
    text, nodes = fragment
    index = list(parent).index(el)
    tail = text + (el.tail or "") if not nodes else el.tail or ""
    if nodes:
        if index == 0:
            parent.text = (parent.text or "") + text
        else:
            parent[index - 1].tail = (parent[index - 1].tail or "") + text
    parent.remove(el)
    for offset, node in enumerate(nodes):
        parent.insert(index + offset, node)
    if nodes:
        nodes[-1].tail = (nodes[-1].tail or "") + tail
    elif index == 0:
        parent.text = (parent.text or "") + tail
    else:
        parent[index - 1].tail = (parent[index - 1].tail or "") + tail


TRANSFORM_OPERATIONS: dict[str, Callable[[dict, etree.Element, Fragment], None]] = {
    "append": _append,
    "prepend": _prepend,
    "insert-before": _insert_before,
    "insert-after": _insert_after,
    "replace": _replace,
}


def apply_transforms(
    root: etree.Element, transforms: Iterable[Sequence[str]]
) -> etree.Element:
    """Run transforms in order against a parsed page."""
    for transform in transforms:
        selector, op, *htmls = transform
        operation = TRANSFORM_OPERATIONS.get(op)
        if operation is None:
            msg = f"Unknown transform operation: {op}"
            raise ValueError(msg)
        fragment = _fragment(htmls)
        matches = list(root.iterfind(selector))
        if not matches:
            logger.debug("Transform selector matched nothing: %s", selector)
        parent_map = {child: parent for parent in root.iter() for child in parent}
        for el in matches:
            operation(parent_map, el, _copy(fragment))
    return root


def transform_html(project: Project, html: str) -> str:
    """Apply the project's theme transforms to a rendered page."""
    return serialize_html(apply_transforms(parse_html(html), project.transforms))
