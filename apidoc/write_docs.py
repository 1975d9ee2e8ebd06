"""Write a project's HTML documentation to disk.

Pages are written for every view of the project: one aggregate index, then
for cross-platform projects an index and namespace pages per language, and
finally one page per document.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from apidoc.load_config import load_config
from apidoc.load_project import load_project
from apidoc.page_filenames import doc_filename, index_filename, ns_filename
from apidoc.platform_projection import (
    aggregate_view,
    document_view,
    project_for_language,
)
from apidoc.project import Project
from apidoc.render_document_page import render_document_page
from apidoc.render_index_page import render_index_page
from apidoc.render_namespace_page import render_namespace_page
from apidoc.themes import apply_theme_transforms, copy_theme_resources
from apidoc.transform_html import transform_html

logger = logging.getLogger(__name__)


def _write_page(out_file: Path, project: Project, html: str) -> None:
    out_file.write_text(transform_html(project, html), encoding="utf-8")
    logger.debug("Wrote %s", out_file)


def write_index(output_dir: Path, project: Project) -> int:
    """Write the aggregate index and, if cross-platform, one per language."""
    written = 0
    if project.cross_platform:
        for language in project.languages:
            view = project_for_language(project, language)
            _write_page(output_dir / index_filename(language), view, render_index_page(view))
            written += 1

    view = aggregate_view(project)
    _write_page(output_dir / index_filename(None), view, render_index_page(view))
    return written + 1


def write_namespaces(output_dir: Path, project: Project) -> int:
    """Write a page per namespace, per language for cross-platform projects."""
    if project.cross_platform:
        views = [project_for_language(project, lang) for lang in project.languages]
    else:
        views = [replace(project, show_platforms=False, show_namespaces=True)]

    written = 0
    for view in views:
        for namespace in view.namespaces:
            page = render_namespace_page(view, namespace)
            _write_page(output_dir / ns_filename(namespace), view, page)
            written += 1
    return written


def write_documents(output_dir: Path, project: Project) -> int:
    """Write a page per free-standing document."""
    view = document_view(project)
    for document in project.documents:
        _write_page(output_dir / doc_filename(document), view, render_document_page(view, document))
    return len(project.documents)


def write_docs(project: Project) -> int:
    """Take project documentation info and turn it into formatted HTML."""
    # Resolve themes before anything is written so a missing theme fails fast.
    project = apply_theme_transforms(project)

    output_dir = Path(project.output_path).resolve()
    output_dir.mkdir(parents=True, exist_ok=True)
    copy_theme_resources(output_dir, project)

    written = write_index(output_dir, project)
    written += write_namespaces(output_dir, project)
    written += write_documents(output_dir, project)
    print(f"Generated {written} HTML pages into: {output_dir}")
    return written


def run(args: argparse.Namespace) -> int:
    """Load the project described by the CLI arguments and write its docs."""
    if not args.project_file.exists():
        msg = f"Project file not found: {args.project_file}"
        raise SystemExit(msg)

    config = load_config(args.project_file, args.config)
    project = load_project(config, base_dir=args.project_file.parent)
    if args.output_path:
        project = replace(project, output_path=str(args.output_path))
    write_docs(project)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the documentation writer from the command line."""
    ap = argparse.ArgumentParser(
        description="Generate static HTML API documentation from project metadata.",
    )
    ap.add_argument(
        "project_file",
        type=Path,
        help="YAML file describing the project's namespaces, vars and documents",
    )
    ap.add_argument(
        "--config",
        help="YAML file whose settings override the project file",
    )
    ap.add_argument(
        "--output-path",
        type=Path,
        help="Directory to write HTML into (default: output_path from config)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress information",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
