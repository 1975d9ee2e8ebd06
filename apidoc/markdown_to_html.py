"""Render markdown to HTML with links resolved against the project.

Python-Markdown does the parsing; this module adds the inline syntax it lacks
(wiki links, strikethrough, bare URLs) and swaps its link processors for ones
that pass every link through a ``LinkResolver`` before it is emitted.
"""

import re
import xml.etree.ElementTree as etree

import markdown
from markdown.blockprocessors import HashHeaderProcessor
from markdown.extensions import Extension
from markdown.inlinepatterns import (
    LINK_RE,
    REFERENCE_RE,
    InlineProcessor,
    LinkInlineProcessor,
    ReferenceInlineProcessor,
    ShortReferenceInlineProcessor,
    SimpleTagInlineProcessor,
)
from markdown.util import AtomicString

from apidoc.autolink import URL_RE
from apidoc.header_slug import header_slug
from apidoc.link_node import LinkKind, LinkNode
from apidoc.link_resolver import LinkResolver
from apidoc.namespace_info import NamespaceInfo
from apidoc.project import Project

# [[target]] or [[target|text]]
WIKILINK_RE = r"\[\[([^\]|\n]+?)(?:\|([^\]\n]+?))?\]\]"
STRIKETHROUGH_RE = r"(~{2})(.+?)~{2}"
BARE_URL_RE = r"(?<![\w\"'=/<>(])" + URL_RE.pattern


def _resolve_href(el: etree.Element, kind: LinkKind, resolver: LinkResolver) -> None:
    href = el.get("href")
    if href is None:
        return
    link = LinkNode(kind=kind, text="".join(el.itertext()), target=href)
    resolved = resolver.resolve(link)
    if resolved.valid:
        el.set("href", resolved.url)


class WikiLinkInlineProcessor(InlineProcessor):
    """Turn ``[[target]]`` into a link to a namespace or var."""

    def __init__(self, pattern: str, md: markdown.Markdown, resolver: LinkResolver) -> None:
        super().__init__(pattern, md)
        self.resolver = resolver

    def handleMatch(self, m: re.Match, data: str):  # noqa: N802
        target = m.group(1).strip()
        text = (m.group(2) or m.group(1)).strip()
        resolved = self.resolver.resolve(LinkNode(LinkKind.WIKI_LINK, text, target))
        if not resolved.valid:
            return AtomicString(m.group(0)), m.start(0), m.end(0)
        el = etree.Element("a")
        el.set("href", resolved.url)
        el.text = text
        return el, m.start(0), m.end(0)


class ResolvingLinkInlineProcessor(LinkInlineProcessor):
    """Inline ``[text](url)`` links with the URL resolved."""

    def __init__(self, pattern: str, md: markdown.Markdown, resolver: LinkResolver) -> None:
        super().__init__(pattern, md)
        self.resolver = resolver

    def handleMatch(self, m: re.Match, data: str):  # noqa: N802
        el, start, end = super().handleMatch(m, data)
        if el is not None:
            _resolve_href(el, LinkKind.MARKDOWN_LINK, self.resolver)
        return el, start, end


class ResolvingReferenceInlineProcessor(ReferenceInlineProcessor):
    """Reference ``[text][ref]`` links with the URL resolved."""

    def __init__(self, pattern: str, md: markdown.Markdown, resolver: LinkResolver) -> None:
        super().__init__(pattern, md)
        self.resolver = resolver

    def makeTag(self, href: str, title: str, text: str) -> etree.Element:  # noqa: N802
        el = super().makeTag(href, title, text)
        _resolve_href(el, LinkKind.MARKDOWN_LINK_REFERENCE, self.resolver)
        return el


class ResolvingShortReferenceInlineProcessor(ShortReferenceInlineProcessor):
    """Short reference ``[ref]`` links with the URL resolved."""

    def __init__(self, pattern: str, md: markdown.Markdown, resolver: LinkResolver) -> None:
        super().__init__(pattern, md)
        self.resolver = resolver

    def makeTag(self, href: str, title: str, text: str) -> etree.Element:  # noqa: N802
        el = super().makeTag(href, title, text)
        _resolve_href(el, LinkKind.MARKDOWN_LINK_REFERENCE, self.resolver)
        return el


class BareUrlInlineProcessor(InlineProcessor):
    """Link bare ``http://...`` URLs in running text."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(self, m: re.Match, data: str):  # noqa: N802
        el = etree.Element("a")
        el.set("href", m.group(1))
        el.text = AtomicString(m.group(1))
        return el, m.start(0), m.end(0)


class AtxHeaderSpaceProcessor(HashHeaderProcessor):
    """ATX headings that require whitespace after the opening hashes."""

    RE = re.compile(
        r"(?:^|\n)(?P<level>#{1,6})(?=[ \t]|\n|$)(?P<header>(?:\\.|[^\\])*?)#*(?:\n|$)"
    )


class LinkResolverExtension(Extension):
    """Register the project-aware link processors."""

    def __init__(self, resolver: LinkResolver, **kwargs) -> None:
        self.resolver = resolver
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        r = self.resolver
        md.inlinePatterns.register(
            WikiLinkInlineProcessor(WIKILINK_RE, md, r), "wikilink", 175
        )
        md.inlinePatterns.register(
            ResolvingReferenceInlineProcessor(REFERENCE_RE, md, r), "reference", 170
        )
        md.inlinePatterns.register(
            ResolvingLinkInlineProcessor(LINK_RE, md, r), "link", 160
        )
        md.inlinePatterns.register(
            ResolvingShortReferenceInlineProcessor(REFERENCE_RE, md, r),
            "short_reference",
            130,
        )


class DocExtrasExtension(Extension):
    """Syntax not covered by the bundled extensions."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        md.inlinePatterns.register(BareUrlInlineProcessor(BARE_URL_RE, md), "bare_url", 115)
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 65
        )
        md.parser.blockprocessors.register(
            AtxHeaderSpaceProcessor(md.parser), "hashheader", 70
        )


def make_markdown(project: Project, namespace: NamespaceInfo | None = None) -> markdown.Markdown:
    """Build a markdown converter bound to one page's link context."""
    return markdown.Markdown(
        extensions=[
            "tables",
            "fenced_code",
            "def_list",
            "abbr",
            "smarty",
            "toc",
            DocExtrasExtension(),
            LinkResolverExtension(LinkResolver(project, namespace)),
        ],
        extension_configs={
            "toc": {"anchorlink": True, "slugify": header_slug},
        },
        output_format="html",
    )


def markdown_to_html(
    text: str,
    project: Project,
    namespace: NamespaceInfo | None = None,
) -> str:
    """Convert markdown to HTML, resolving links for ``namespace``'s page."""
    return make_markdown(project, namespace).convert(text)
