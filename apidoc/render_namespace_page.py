"""Logic for rendering namespace pages."""

import logging
from dataclasses import replace
from html import escape as h

from apidoc.format_docstring import format_docstring
from apidoc.languages import language_info, sorted_languages
from apidoc.namespace_info import NamespaceInfo
from apidoc.page_filenames import var_uri
from apidoc.project import Project
from apidoc.render_chrome import (
    header,
    link_to,
    primary_sidebar,
    sorted_public_vars,
    vars_sidebar,
)
from apidoc.source_uri import var_source_uri
from apidoc.type_sig import format_form, type_sig
from apidoc.var_id import var_id
from apidoc.var_info import VarInfo

logger = logging.getLogger(__name__)

DEFAULT_META = '<meta charset="UTF-8">'


def added_and_deprecated_docs(entity: VarInfo | NamespaceInfo) -> list[str]:
    """Render the added/deprecated markers of a var or namespace."""
    parts = []
    if entity.added:
        parts.append(f'<h4 class="added">added in {h(str(entity.added))}</h4>')
    if entity.deprecated:
        since = f" in {h(entity.deprecated)}" if isinstance(entity.deprecated, str) else ""
        parts.append(f'<h4 class="deprecated">deprecated{since}</h4>')
    return parts


def var_usage(var: VarInfo) -> list[str]:
    """Render one call form per arglist, e.g. ``(foo x y)``."""
    return [format_form([var.name, *arglist]) for arglist in var.arglists]


def _var_languages(project: Project, namespace: NamespaceInfo, var: VarInfo) -> list[str]:
    """Render badges for the languages a var is documented in."""
    parts = []
    var_langs = project.var_langs.get(namespace.name, {}).get(var.name, frozenset())
    for language in sorted_languages(project.languages):
        if language not in var_langs:
            continue
        ext = h(language_info(language).ext)
        if language == project.language:
            parts.append(f'<h4 class="lang current">{ext}</h4>')
        else:
            other = replace(namespace, language=language)
            parts.append(f'<h4 class="lang">{link_to(var_uri(other, var.name), ext)}</h4>')
    return parts


def _source_link(project: Project, var: VarInfo) -> list[str]:
    if not project.source_uri:
        return []
    if not var.path:
        logger.warning("Could not generate source link for %s", var.name)
        return []
    uri = var_source_uri(project, var)
    if uri is None:
        return []
    return [f'<div class="src-link">{link_to(uri, "view source")}</div>']


def var_docs(project: Project, namespace: NamespaceInfo, var: VarInfo) -> str:
    """Render the documentation block of a single var."""
    parts = [
        f'<div class="public anchor" id="{h(var_id(var.name))}">',
        f"<h3>{h(var.name)}</h3>",
    ]
    if var.type != "var":
        parts.append(f'<h4 class="type">{h(var.type)}</h4>')
    if var.dynamic:
        parts.append('<h4 class="dynamic">dynamic</h4>')
    if project.cross_platform:
        parts.extend(_var_languages(project, namespace, var))
    parts.extend(added_and_deprecated_docs(var))

    if var.type_sig is not None:
        sig = h(type_sig(namespace.name, var.type_sig))
        parts.append(f'<div class="type-sig"><pre>{sig}</pre></div>')

    parts.append('<div class="usage">')
    parts.extend(f"<code>{h(form)}</code>" for form in var_usage(var))
    parts.append("</div>")
    parts.append(f'<div class="doc">{format_docstring(project, namespace, var)}</div>')

    if var.members:
        # members link to their owner's source, not their own
        member_project = replace(project, source_uri=None)
        parts.append('<div class="members"><h4>members</h4><div class="inner">')
        parts.extend(var_docs(member_project, namespace, m) for m in var.members)
        parts.append("</div></div>")

    parts.extend(_source_link(project, var))
    parts.append("</div>")
    return "".join(parts)


def render_namespace_page(project: Project, namespace: NamespaceInfo) -> str:
    """Render a namespace page listing all of its public vars."""
    parts = [
        "<!DOCTYPE html>",
        "<html><head>",
        DEFAULT_META,
        f"<title>{h(namespace.name)} documentation</title>",
        "</head><body>",
        header(project),
        primary_sidebar(project, namespace),
        vars_sidebar(namespace),
        '<div id="content" class="namespace-docs">',
        f'<h1 id="top" class="anchor">{h(namespace.name)}</h1>',
    ]
    parts.extend(added_and_deprecated_docs(namespace))
    parts.append(f'<div class="doc">{format_docstring(project, namespace, namespace)}</div>')
    parts.extend(var_docs(project, namespace, var) for var in sorted_public_vars(namespace))
    parts.append("</div></body></html>")
    return "\n".join(parts)
