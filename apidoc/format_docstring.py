"""Render docstrings and documents according to their format tag.

Formatters live in a registry keyed by format tag. Tags with no registered
formatter fall back to ``plaintext``.
"""

import html
from collections.abc import Callable
from typing import Protocol

from apidoc.autolink import extract_anchors, replace_anchors
from apidoc.document_info import DocumentInfo
from apidoc.markdown_to_html import markdown_to_html
from apidoc.namespace_info import NamespaceInfo
from apidoc.project import Project

DEFAULT_FORMAT = "plaintext"


class Documented(Protocol):
    """Anything carrying a docstring and its format tag."""

    doc: str | None
    doc_format: str | None


DocstringFormatter = Callable[[Project, NamespaceInfo | None, Documented], str]
DocumentFormatter = Callable[[Project, DocumentInfo], str]

DOCSTRING_FORMATS: dict[str, DocstringFormatter] = {}
DOCUMENT_FORMATS: dict[str, DocumentFormatter] = {}


def register_docstring_format(tag: str) -> Callable[[DocstringFormatter], DocstringFormatter]:
    """Register a docstring formatter for a format tag."""

    def decorator(fn: DocstringFormatter) -> DocstringFormatter:
        DOCSTRING_FORMATS[tag] = fn
        return fn

    return decorator


def register_document_format(tag: str) -> Callable[[DocumentFormatter], DocumentFormatter]:
    """Register a document formatter for a format tag."""

    def decorator(fn: DocumentFormatter) -> DocumentFormatter:
        DOCUMENT_FORMATS[tag] = fn
        return fn

    return decorator


def plaintext_to_html(text: str) -> str:
    """Escape plain text, keeping bare URLs clickable."""
    extracted, anchors = extract_anchors(text)
    return replace_anchors(html.escape(extracted, quote=False), anchors)


@register_docstring_format("plaintext")
def _format_plaintext(
    project: Project, namespace: NamespaceInfo | None, entity: Documented
) -> str:
    if not entity.doc:
        return ""
    return f'<pre class="plaintext">{plaintext_to_html(entity.doc)}</pre>'


@register_docstring_format("markdown")
def _format_markdown(
    project: Project, namespace: NamespaceInfo | None, entity: Documented
) -> str:
    if not entity.doc:
        return ""
    return f'<div class="markdown">{markdown_to_html(entity.doc, project, namespace)}</div>'


def format_docstring(
    project: Project,
    namespace: NamespaceInfo | None,
    entity: Documented,
) -> str:
    """Format the docstring of a var or namespace into HTML."""
    formatter = DOCSTRING_FORMATS.get(
        entity.doc_format or DEFAULT_FORMAT, DOCSTRING_FORMATS[DEFAULT_FORMAT]
    )
    return formatter(project, namespace, entity)


@register_document_format("plaintext")
def _format_plaintext_document(project: Project, document: DocumentInfo) -> str:
    return f'<pre class="plaintext">{plaintext_to_html(document.content)}</pre>'


@register_document_format("markdown")
def _format_markdown_document(project: Project, document: DocumentInfo) -> str:
    return f'<div class="markdown">{markdown_to_html(document.content, project)}</div>'


def format_document(project: Project, document: DocumentInfo) -> str:
    """Format a free-standing document into HTML."""
    formatter = DOCUMENT_FORMATS.get(document.format, DOCUMENT_FORMATS[DEFAULT_FORMAT])
    return formatter(project, document)
