"""Logic for rendering the header and sidebars shared by every page."""

from html import escape as h

from apidoc.document_info import DocumentInfo
from apidoc.languages import language_info, sorted_languages
from apidoc.namespace_hierarchy import namespace_hierarchy, split_ns
from apidoc.namespace_info import NamespaceInfo
from apidoc.page_filenames import doc_filename, index_filename, ns_filename, var_uri
from apidoc.project import Project
from apidoc.var_info import VarInfo

# Row height and offsets of the connector lines, for 15px text on 31px rows.
ROW_HEIGHT = 31


def link_to(url: str, inner: str) -> str:
    """Wrap markup in a link."""
    return f'<a href="{h(url)}">{inner}</a>'


def tree_part(height: int) -> str:
    """Render the connector lines drawn to the left of a nested entry."""
    if height == 0:
        return '<span class="tree"><span class="top"></span><span class="bottom"></span></span>'
    bottom = 15 + height * ROW_HEIGHT
    return (
        '<span class="tree"><span class="top"></span>'
        f'<span class="bottom" style="height: {bottom}px;"></span></span>'
    )


def project_title(project: Project) -> str:
    """Render the project name and version."""
    return (
        '<span class="project-title">'
        f'<span class="project-name">{h(project.name)}</span> '
        f'<span class="project-version">{h(project.version)}</span></span>'
    )


def sorted_public_vars(namespace: NamespaceInfo) -> list[VarInfo]:
    """Order a namespace's vars case-insensitively by name."""
    return sorted(namespace.publics, key=lambda v: (v.name.lower(), v.name))


def header_platforms(project: Project) -> str:
    """Render the language switcher of a cross-platform project."""
    if not project.cross_platform:
        return ""
    parts = ['<div id="langs">']
    for language in sorted_languages(project.languages):
        ext = h(language_info(language).ext)
        if language == project.language:
            parts.append(f'<div class="lang current">{ext}</div>')
        else:
            parts.append(f'<div class="lang">{link_to(index_filename(language), ext)}</div>')
    parts.append("</div>")
    return "".join(parts)


def header(project: Project) -> str:
    """Render the page header."""
    return (
        '<div id="header">'
        "<h2>Generated by apidoc</h2>"
        f"<h1>{link_to('index.html', project_title(project))}</h1>"
        f"{header_platforms(project)}"
        "</div>"
    )


def index_link(project: Project, *, on_index: bool) -> str:
    """Render the link back to the project index."""
    if project.cross_platform:
        return ""
    current = ' class="depth-1 current"' if on_index else ' class="depth-1"'
    inner = '<div class="inner">Index</div>'
    return (
        '<h3 class="no-link"><span class="inner">Project</span></h3>'
        '<ul class="index-link">'
        f'<li{current}>{link_to("index.html", inner)}</li>'
        "</ul>"
    )


def topics_menu(project: Project, current_doc: DocumentInfo | None) -> str:
    """Render the list of free-standing documents."""
    if not project.documents:
        return ""
    parts = ['<h3 class="no-link"><span class="inner">Topics</span></h3>', "<ul>"]
    for doc in project.documents:
        cls = "depth-1 current" if doc == current_doc else "depth-1"
        inner = f'<div class="inner"><span>{h(doc.title)}</span></div>'
        parts.append(f'<li class="{cls}">{link_to(doc_filename(doc), inner)}</li>')
    parts.append("</ul>")
    return "".join(parts)


def nested_namespaces(
    namespaces: tuple[NamespaceInfo, ...], current_ns: NamespaceInfo | None
) -> str:
    """Render namespaces as a tree, with inert rows for missing parents."""
    ns_map = {ns.name: ns for ns in namespaces}
    parts = ["<ul>"]
    for node in namespace_hierarchy(ns_map):
        cls = f"depth-{node.depth}" + (" branch" if node.branch else "")
        short = split_ns(node.name)[-1]
        inner = f'<div class="inner">{tree_part(node.height)}<span>{h(short)}</span></div>'
        ns = ns_map.get(node.name)
        if ns is not None:
            if ns == current_ns:
                cls += " current"
            parts.append(f'<li class="{cls}">{link_to(ns_filename(ns), inner)}</li>')
        else:
            parts.append(f'<li class="{cls}"><div class="no-link">{inner}</div></li>')
    parts.append("</ul>")
    return "".join(parts)


def flat_namespaces(
    namespaces: tuple[NamespaceInfo, ...], current_ns: NamespaceInfo | None
) -> str:
    """Render namespaces as a single-level list."""
    parts = ["<ul>"]
    for ns in sorted(namespaces, key=lambda n: n.name):
        cls = "depth-1 current" if ns == current_ns else "depth-1"
        inner = f'<div class="inner"><span>{h(ns.name)}</span></div>'
        parts.append(f'<li class="{cls}">{link_to(ns_filename(ns), inner)}</li>')
    parts.append("</ul>")
    return "".join(parts)


def namespace_list_type(project: Project) -> str:
    """Pick flat or nested namespace lists, nesting when there are several."""
    if project.namespace_list:
        return project.namespace_list
    return "nested" if len(project.namespaces) > 1 else "flat"


def namespaces_menu(project: Project, current_ns: NamespaceInfo | None) -> str:
    """Render the namespace list of the primary sidebar."""
    if not project.show_namespaces:
        return ""
    list_type = namespace_list_type(project)
    if list_type == "flat":
        items = flat_namespaces(project.namespaces, current_ns)
    elif list_type == "nested":
        items = nested_namespaces(project.namespaces, current_ns)
    else:
        msg = f"Unknown namespace list type: {list_type}"
        raise ValueError(msg)
    return '<h3 class="no-link"><span class="inner">Namespaces</span></h3>' + items


def platforms_menu(project: Project) -> str:
    """Render links to each language's index."""
    if not project.show_platforms:
        return ""
    parts = [
        '<h3 class="no-link"><span class="inner">Platforms</span></h3>',
        '<ul class="index-link">',
    ]
    for language in sorted_languages(project.languages):
        inner = f'<div class="inner">{h(language_info(language).name)}</div>'
        parts.append(f'<li class="depth-1">{link_to(index_filename(language), inner)}</li>')
    parts.append("</ul>")
    return "".join(parts)


def primary_sidebar(
    project: Project, current: NamespaceInfo | DocumentInfo | None = None
) -> str:
    """Render the left-hand sidebar."""
    current_doc = current if isinstance(current, DocumentInfo) else None
    current_ns = current if isinstance(current, NamespaceInfo) else None
    return (
        '<div class="sidebar primary">'
        + index_link(project, on_index=current is None)
        + platforms_menu(project)
        + topics_menu(project, current_doc)
        + namespaces_menu(project, current_ns)
        + "</div>"
    )


def vars_sidebar(namespace: NamespaceInfo) -> str:
    """Render the list of a namespace's vars and their members."""
    parts = [
        '<div class="sidebar secondary">',
        "<h3>" + link_to("#top", '<span class="inner">Public Vars</span>') + "</h3>",
        "<ul>",
    ]
    for var in sorted_public_vars(namespace):
        inner = f'<div class="inner"><span>{h(var.name)}</span></div>'
        parts.append(f'<li class="depth-1">{link_to(var_uri(namespace, var.name), inner)}</li>')
        for i, member in enumerate(var.members):
            branch = i < len(var.members) - 1
            cls = "depth-2 branch" if branch else "depth-2"
            inner = f'<div class="inner">{tree_part(0)}<span>{h(member.name)}</span></div>'
            parts.append(
                f'<li class="{cls}">{link_to(var_uri(namespace, member.name), inner)}</li>'
            )
    parts.append("</ul></div>")
    return "".join(parts)
