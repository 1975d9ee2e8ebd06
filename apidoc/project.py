"""Data model for a whole documentation project."""

from dataclasses import dataclass, field
from typing import Any

from apidoc.document_info import DocumentInfo
from apidoc.namespace_info import NamespaceInfo


@dataclass(frozen=True)
class Project:
    """Immutable render configuration for one documentation build.

    A cross-platform project keeps one namespace tuple per language in
    ``namespaces_by_language``; per-language views are derived with
    ``project_for_language`` and carry only that language's namespaces in
    ``namespaces``.
    """

    name: str
    version: str = ""
    description: str | None = None
    license: dict[str, Any] = field(default_factory=dict)
    package: str | None = None
    namespaces: tuple[NamespaceInfo, ...] = ()
    namespaces_by_language: dict[str, tuple[NamespaceInfo, ...]] = field(
        default_factory=dict
    )
    documents: tuple[DocumentInfo, ...] = ()
    languages: tuple[str, ...] = ()
    base_language: str | None = None
    language: str | None = None
    show_namespaces: bool = True
    show_platforms: bool = False
    themes: tuple[Any, ...] = ()
    theme_paths: tuple[str, ...] = ()
    transforms: tuple[tuple[str, ...], ...] = ()
    namespace_list: str | None = None  # flat/nested, None picks by count
    source_uri: str | dict[str, str] | None = None
    git_commit: str | None = None
    output_path: str = "target/doc"
    # namespace -> var -> languages the var is documented in
    var_langs: dict[str, dict[str, frozenset[str]]] = field(default_factory=dict)

    @property
    def cross_platform(self) -> bool:
        """Check if namespaces are partitioned by more than one language."""
        return len(self.namespaces_by_language) > 1
