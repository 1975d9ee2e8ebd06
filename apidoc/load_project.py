"""Logic for building a Project from loaded configuration."""

import logging
import re
from pathlib import Path
from typing import Any

from apidoc.as_text import as_text
from apidoc.document_info import DocumentInfo
from apidoc.languages import language_info, sorted_languages
from apidoc.namespace_info import NamespaceInfo
from apidoc.platform_projection import cross_platform_namespaces
from apidoc.project import Project
from apidoc.var_info import VarInfo

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = {".md", ".markdown"}
TITLE_RE = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)


def _arglist(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        return tuple(raw.strip().strip("[]").split())
    return tuple(str(x) for x in raw or [])


def build_var(raw: dict[str, Any], default_format: str) -> VarInfo:
    """Build a var, and any members it has, from its YAML mapping."""
    line = raw.get("line")
    return VarInfo(
        name=str(raw["name"]),
        doc=as_text(raw.get("doc")),
        doc_format=raw.get("doc_format") or default_format,
        type=str(raw.get("type") or "var"),
        arglists=tuple(_arglist(a) for a in raw.get("arglists") or []),
        members=tuple(build_var(m, default_format) for m in raw.get("members") or []),
        type_sig=raw.get("type_sig"),
        path=raw.get("path"),
        file=raw.get("file"),
        line=int(line) if line is not None else None,
        dynamic=bool(raw.get("dynamic", False)),
        added=raw.get("added"),
        deprecated=raw.get("deprecated"),
        raw=raw,
    )


def build_namespace(raw: dict[str, Any], default_format: str) -> NamespaceInfo:
    """Build a namespace and its public vars from its YAML mapping."""
    fmt = raw.get("doc_format") or default_format
    return NamespaceInfo(
        name=str(raw["name"]),
        doc=as_text(raw.get("doc")),
        doc_format=fmt,
        publics=tuple(build_var(v, fmt) for v in raw.get("publics") or []),
        added=raw.get("added"),
        deprecated=raw.get("deprecated"),
    )


def build_document(raw: dict[str, Any], base_dir: Path) -> DocumentInfo:
    """Build a document from inline content or a file next to the project."""
    path = raw.get("path")
    if path:
        file = base_dir / path
        content = file.read_text(encoding="utf-8")
        name = raw.get("name") or file.stem
        fmt = raw.get("format") or (
            "markdown" if file.suffix in MARKDOWN_SUFFIXES else "plaintext"
        )
    else:
        content = as_text(raw.get("content")) or ""
        name = raw["name"]
        fmt = raw.get("format") or "markdown"
    title = raw.get("title")
    if not title:
        m = TITLE_RE.search(content) if fmt == "markdown" else None
        title = m.group(1) if m else name
    return DocumentInfo(name=str(name), title=str(title), content=content, format=fmt)


def _namespaces_by_language(
    raw: dict[str, Any], default_format: str
) -> dict[str, tuple[NamespaceInfo, ...]]:
    by_language = {}
    for language, namespaces in raw.items():
        language_info(language)
        by_language[language] = tuple(
            build_namespace(ns, default_format) for ns in namespaces or []
        )
    return by_language


def load_project(config: dict[str, Any], base_dir: Path | None = None) -> Project:
    """Build the project described by a merged configuration mapping."""
    base_dir = base_dir or Path()
    default_format = config.get("default_doc_format") or "plaintext"
    html = config.get("html") or {}

    languages = tuple(config.get("languages") or [])
    base_language = config.get("base_language")
    for language in (*languages, base_language):
        language_info(language)

    raw_namespaces = config.get("namespaces") or []
    namespaces: tuple[NamespaceInfo, ...] = ()
    by_language: dict[str, tuple[NamespaceInfo, ...]] = {}
    if isinstance(raw_namespaces, dict):
        by_language = _namespaces_by_language(raw_namespaces, default_format)
        languages = tuple(sorted_languages(set(languages) | set(by_language)))
        base_language = base_language or languages[0]
        if len(by_language) == 1:
            (language,) = by_language
            namespaces = cross_platform_namespaces(by_language, language, base_language)
    else:
        namespaces = tuple(
            sorted(
                (build_namespace(ns, default_format) for ns in raw_namespaces),
                key=lambda n: n.name,
            )
        )

    documents = tuple(build_document(d, base_dir) for d in config.get("documents") or [])
    logger.info(
        "Loaded %d namespaces and %d documents",
        len(namespaces) + sum(len(v) for v in by_language.values()),
        len(documents),
    )

    return Project(
        name=str(config.get("name") or ""),
        version=str(config.get("version") or ""),
        description=config.get("description"),
        license=dict(config.get("license") or {}),
        package=config.get("package"),
        namespaces=namespaces,
        namespaces_by_language=by_language,
        documents=documents,
        languages=languages,
        base_language=base_language,
        themes=tuple(config.get("themes") or []),
        theme_paths=tuple(str(base_dir / p) for p in config.get("theme_paths") or []),
        transforms=tuple(tuple(t) for t in html.get("transforms") or []),
        namespace_list=html.get("namespace_list"),
        source_uri=config.get("source_uri"),
        git_commit=config.get("git_commit"),
        output_path=str(base_dir / config.get("output_path", "target/doc")),
    )
