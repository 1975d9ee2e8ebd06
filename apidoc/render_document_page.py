"""Logic for rendering free-standing document pages."""

from html import escape as h

from apidoc.document_info import DocumentInfo
from apidoc.format_docstring import format_document
from apidoc.project import Project
from apidoc.render_chrome import header, primary_sidebar
from apidoc.render_namespace_page import DEFAULT_META


def render_document_page(project: Project, document: DocumentInfo) -> str:
    """Render a topic page."""
    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html><head>",
            DEFAULT_META,
            f"<title>{h(document.title)}</title>",
            "</head><body>",
            header(project),
            primary_sidebar(project, document),
            '<div id="content" class="document">',
            f'<div class="doc">{format_document(project, document)}</div>',
            "</div></body></html>",
        ]
    )
