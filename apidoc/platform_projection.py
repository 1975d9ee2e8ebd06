"""Logic for slicing a cross-platform project into per-language views."""

from collections.abc import Mapping
from dataclasses import replace

from apidoc.languages import language_info
from apidoc.namespace_info import NamespaceInfo
from apidoc.project import Project


def cross_platform_namespaces(
    namespaces_by_language: Mapping[str, tuple[NamespaceInfo, ...]],
    language: str,
    base_language: str | None,
) -> tuple[NamespaceInfo, ...]:
    """Return a language's namespaces stamped with their language tags."""
    language_info(language)
    return tuple(
        replace(ns, language=language, base_language=base_language)
        for ns in sorted(namespaces_by_language.get(language, ()), key=lambda n: n.name)
    )


def var_languages(
    namespaces_by_language: Mapping[str, tuple[NamespaceInfo, ...]],
) -> dict[str, dict[str, frozenset[str]]]:
    """Map each namespace and var to the languages it is documented in."""
    found: dict[str, dict[str, set[str]]] = {}
    for language, namespaces in namespaces_by_language.items():
        for ns in namespaces:
            vars_ = found.setdefault(ns.name, {})
            for var in ns.publics:
                vars_.setdefault(var.name, set()).add(language)
    return {
        ns: {var: frozenset(langs) for var, langs in vars_.items()}
        for ns, vars_ in found.items()
    }


def project_for_language(project: Project, language: str) -> Project:
    """Derive the view of a project that documents a single language."""
    return replace(
        project,
        namespaces=cross_platform_namespaces(
            project.namespaces_by_language, language, project.base_language
        ),
        language=language,
        show_platforms=False,
        show_namespaces=True,
        var_langs=var_languages(project.namespaces_by_language),
    )


def aggregate_view(project: Project) -> Project:
    """Derive the view used for the top-level index page."""
    return replace(
        project,
        show_platforms=project.cross_platform,
        show_namespaces=not project.cross_platform,
    )


def document_view(project: Project) -> Project:
    """Derive the view documents are rendered against.

    Wiki links in documents of a cross-platform project resolve against the
    base language's pages.
    """
    if project.cross_platform and project.base_language:
        return project_for_language(project, project.base_language)
    return replace(project, show_platforms=False, show_namespaces=True)
