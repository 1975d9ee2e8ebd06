"""Data models for representing documented namespaces."""

from dataclasses import dataclass

from apidoc.var_info import VarInfo


@dataclass(frozen=True)
class NamespaceInfo:
    """Represents a documented namespace and its public vars."""

    name: str  # fully qualified, e.g. foo.bar.baz
    doc: str | None = None
    doc_format: str | None = None
    publics: tuple[VarInfo, ...] = ()
    language: str | None = None
    base_language: str | None = None  # stamped by the platform projector
    added: str | None = None
    deprecated: str | bool | None = None
