"""Logic for rendering project index pages."""

import re
from dataclasses import replace
from html import escape as h

from apidoc.format_docstring import format_docstring
from apidoc.languages import language_info, sorted_languages
from apidoc.page_filenames import doc_filename, index_filename, ns_filename, var_uri
from apidoc.project import Project
from apidoc.render_chrome import header, link_to, primary_sidebar, project_title, sorted_public_vars
from apidoc.render_namespace_page import DEFAULT_META
from apidoc.summary import summary


def add_ending(s: str, ending: str) -> str:
    """Append ``ending`` unless the string already ends with it."""
    return s if s.endswith(ending) else s + ending


def strip_prefix(s: str | None, prefix: str) -> str | None:
    """Remove a case-insensitive prefix."""
    if s is None:
        return None
    return re.sub(f"(?i)^{re.escape(prefix)}", "", s)


def _license(project: Project) -> list[str]:
    name = strip_prefix(project.license.get("name"), "the ")
    if not name:
        return []
    url = project.license.get("url")
    text = link_to(url, h(name)) if url else h(name)
    return [f'<h5 class="license">Released under the {text}</h5>']


def package_name(package: str | None) -> str | None:
    """Collapse ``group/artifact`` to ``artifact`` when both parts are equal."""
    if package is None:
        return None
    group, sep, artifact = package.partition("/")
    return artifact if sep and group == artifact else package


def _installation(project: Project) -> list[str]:
    if not project.package:
        return []
    deps = f'[{package_name(project.package)} "{project.version}"]'
    return [
        "<h2>Installation</h2>",
        "<p>To install, add the following dependency to your project or build file:</p>",
        f'<pre class="deps">{h(deps)}</pre>',
    ]


def _topics(project: Project) -> list[str]:
    if not project.documents:
        return []
    items = "".join(
        f"<li>{link_to(doc_filename(doc), h(doc.title))}</li>" for doc in project.documents
    )
    return ["<h2>Topics</h2>", f'<ul class="topics">{items}</ul>']


def _platforms(project: Project) -> list[str]:
    if not project.show_platforms:
        return []
    items = "".join(
        f"<li>{link_to(index_filename(lang), h(language_info(lang).name))}</li>"
        for lang in sorted_languages(project.languages)
    )
    return [
        "<h2>Platforms</h2>",
        "<p>This project includes code for multiple platforms, please "
        "<strong>choose a platform</strong> to view its documentation:</p>",
        f"<ul>{items}</ul>",
    ]


def _namespaces(project: Project) -> list[str]:
    if not project.show_namespaces:
        return []
    parts = ["<h2>Namespaces</h2>"]
    for ns in sorted(project.namespaces, key=lambda n: n.name):
        doc = format_docstring(project, None, replace(ns, doc=summary(ns.doc)))
        var_links = "".join(
            f"<li> {link_to(var_uri(ns, var.name), h(var.name))} </li>"
            for var in sorted_public_vars(ns)
        )
        parts.append(
            '<div class="namespace">'
            f"<h3>{link_to(ns_filename(ns), h(ns.name))}</h3>"
            f'<div class="doc">{doc}</div>'
            '<div class="index"><p>Public variables and functions:</p>'
            f"<ul>{var_links}</ul></div></div>"
        )
    return parts


def render_index_page(project: Project) -> str:
    """Render the project index, or one language's index for a projected view."""
    parts = [
        "<!DOCTYPE html>",
        "<html><head>",
        DEFAULT_META,
        f"<title>{h(project.name)} {h(project.version)}</title>",
        "</head><body>",
        header(project),
        primary_sidebar(project),
        '<div id="content" class="namespace-index">',
        f"<h1>{project_title(project)}</h1>",
    ]
    parts.extend(_license(project))
    if project.description:
        parts.append(f'<div class="doc"><p>{h(add_ending(project.description, "."))}</p></div>')
    parts.extend(_installation(project))
    parts.extend(_topics(project))
    parts.extend(_platforms(project))
    parts.extend(_namespaces(project))
    parts.append("</div></body></html>")
    return "\n".join(parts)
