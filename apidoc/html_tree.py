"""Parse HTML into an ElementTree and serialize it back.

Python-Markdown already hands out ``xml.etree`` elements, so theme transforms
work on the same tree type. The parser is forgiving: void elements never
need closing and stray end tags close back to the nearest matching open
element.
"""

import xml.etree.ElementTree as etree
from html.parser import HTMLParser

DOCTYPE = "<!DOCTYPE html>"

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


class _TreeParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = etree.Element("fragment")
        self.stack: list[etree.Element] = [self.root]

    def _add_text(self, text: str) -> None:
        parent = self.stack[-1]
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + text
        else:
            parent.text = (parent.text or "") + text

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        el = etree.SubElement(
            self.stack[-1], tag, {k: "" if v is None else v for k, v in attrs}
        )
        if tag not in VOID_ELEMENTS:
            self.stack.append(el)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        etree.SubElement(self.stack[-1], tag, {k: "" if v is None else v for k, v in attrs})

    def handle_endtag(self, tag: str) -> None:
        for i in range(len(self.stack) - 1, 0, -1):
            if self.stack[i].tag == tag:
                del self.stack[i:]
                return

    def handle_data(self, data: str) -> None:
        self._add_text(data)

    def handle_comment(self, data: str) -> None:
        self.stack[-1].append(etree.Comment(data))


def parse_fragment(text: str) -> etree.Element:
    """Parse HTML into a wrapper element holding the parsed nodes."""
    parser = _TreeParser()
    parser.feed(text)
    parser.close()
    return parser.root


def parse_html(text: str) -> etree.Element:
    """Parse a full HTML document and return its ``<html>`` element."""
    root = parse_fragment(text)
    html = root.find("html")
    if html is None:
        html = root
        html.tag = "html"
    return html


def serialize_html(root: etree.Element) -> str:
    """Serialize an ``<html>`` element as an HTML5 document."""
    return DOCTYPE + "\n" + etree.tostring(root, encoding="unicode", method="html")
