"""Utilities for naming generated HTML files and anchors."""

from apidoc.document_info import DocumentInfo
from apidoc.languages import language_info
from apidoc.namespace_info import NamespaceInfo
from apidoc.var_id import var_id


def index_filename(language: str | None = None) -> str:
    """Return the index file for a language, or the aggregate index."""
    info = language_info(language)
    suffix = info.filename_suffix if info else ""
    return f"index{suffix}.html"


def ns_filename(namespace: NamespaceInfo) -> str:
    """Return the page for a namespace, suffixed unless it is the base language."""
    info = language_info(namespace.language, namespace.base_language)
    suffix = info.filename_suffix if info else ""
    return f"{namespace.name}{suffix}.html"


def doc_filename(document: DocumentInfo) -> str:
    """Return the page for a free-standing document."""
    return f"{document.name}.html"


def var_uri(namespace: NamespaceInfo, var_name: str) -> str:
    """Return the link to a var's anchor on its namespace page."""
    return f"{ns_filename(namespace)}#{var_id(var_name)}"
