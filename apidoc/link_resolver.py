"""Logic for resolving in-text links to generated pages and anchors."""

import logging

from apidoc.fix_markdown_url import fix_markdown_url
from apidoc.link_node import LinkKind, LinkNode
from apidoc.namespace_info import NamespaceInfo
from apidoc.page_filenames import ns_filename, var_uri
from apidoc.project import Project
from apidoc.resolved_link import ResolvedLink
from apidoc.search_vars import search_vars

logger = logging.getLogger(__name__)


class LinkResolver:
    """Resolves links for one page, relative to the namespace being rendered."""

    def __init__(self, project: Project, namespace: NamespaceInfo | None = None) -> None:
        """Bind the resolver to a project view and the current namespace."""
        self.project = project
        self.namespace = namespace
        self._ns_by_name = {ns.name: ns for ns in project.namespaces}

    def resolve(self, link: LinkNode) -> ResolvedLink:
        """Return the corrected URL for a link."""
        if link.kind is LinkKind.WIKI_LINK:
            url = self.find_wiki_link(link.target)
            if url is None:
                logger.debug("Unresolved wiki link: %s", link.target)
                return ResolvedLink.unresolved(link.target)
            return ResolvedLink(valid=True, url=url)
        return ResolvedLink(valid=True, url=fix_markdown_url(link.target))

    def find_wiki_link(self, text: str) -> str | None:
        """Map wiki link text to a namespace page or a var anchor."""
        ns = self._ns_by_name.get(text)
        if ns is not None:
            return ns_filename(ns)

        current = self.namespace.name if self.namespace else None
        found = search_vars(self.project.namespaces, text, current)
        if found is None:
            return None
        owner, var = found
        return var_uri(owner, var.name)
