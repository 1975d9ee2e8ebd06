"""Logic for loading themes and copying their resources.

A theme lives in ``<theme dir>/<name>/theme.yml`` and may declare
``resources`` to copy into the output, ``defaults`` for its parameters and
``transforms`` to apply to every page. Themes are referenced either by name
or as ``[name, {param: value}]``.
"""

import logging
import shutil
from dataclasses import replace
from pathlib import Path
from string import Template
from typing import Any

import yaml

from apidoc.errors import ThemeNotFoundError
from apidoc.project import Project

logger = logging.getLogger(__name__)

THEMES_DIR = Path(__file__).parent / "themes"


def theme_name(theme: Any) -> str:
    """Return the name part of a theme reference."""
    if isinstance(theme, (list, tuple)):
        return str(theme[0])
    return str(theme)


def theme_params(theme: Any) -> Any:
    """Return the parameter part of a theme reference."""
    if isinstance(theme, (list, tuple)) and len(theme) > 1:
        return theme[1] if theme[1] is not None else {}
    return {}


def theme_path(theme: Any, theme_paths: tuple[str, ...] = ()) -> Path | None:
    """Locate the directory of a theme, searching user paths first."""
    name = theme_name(theme)
    for root in [*map(Path, theme_paths), THEMES_DIR]:
        candidate = root / name
        if (candidate / "theme.yml").is_file():
            return candidate
    return None


def insert_params(theme_data: dict[str, Any], theme: Any) -> dict[str, Any]:
    """Substitute ``${param}`` placeholders throughout the theme data."""
    params = theme_params(theme)
    defaults = theme_data.get("defaults", {})
    if not isinstance(params, dict):
        msg = "Theme parameters must be a map"
        raise TypeError(msg)
    if not isinstance(defaults, dict):
        msg = "Theme defaults must be a map"
        raise TypeError(msg)
    values = {str(k): str(v) for k, v in {**defaults, **params}.items()}

    def walk(node: Any) -> Any:
        if isinstance(node, dict):
            return {k: walk(v) for k, v in node.items()}
        if isinstance(node, list):
            return [walk(x) for x in node]
        if isinstance(node, str):
            return Template(node).safe_substitute(values)
        return node

    return walk({k: v for k, v in theme_data.items() if k != "defaults"})


def read_theme(theme: Any, theme_paths: tuple[str, ...] = ()) -> dict[str, Any] | None:
    """Load a theme's data with its parameters applied."""
    path = theme_path(theme, theme_paths)
    if path is None:
        return None
    data = yaml.safe_load((path / "theme.yml").read_text(encoding="utf-8")) or {}
    return insert_params(data, theme)


def apply_one_theme(project: Project, theme: Any) -> Project:
    """Add a theme's transforms to the project."""
    data = read_theme(theme, project.theme_paths)
    if data is None:
        raise ThemeNotFoundError(theme_name(theme))
    transforms = tuple(tuple(t) for t in data.get("transforms") or [])
    return replace(project, transforms=project.transforms + transforms)


def apply_theme_transforms(project: Project) -> Project:
    """Fold every configured theme's transforms into the project."""
    for theme in project.themes:
        project = apply_one_theme(project, theme)
    return project


def copy_theme_resources(output_dir: Path, project: Project) -> None:
    """Copy each theme's declared resources into the output directory."""
    for theme in project.themes:
        root = theme_path(theme, project.theme_paths)
        data = read_theme(theme, project.theme_paths)
        if root is None or data is None:
            raise ThemeNotFoundError(theme_name(theme))
        for resource in data.get("resources") or []:
            target = output_dir / resource
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(root / resource, target)
            logger.debug("Copied theme resource %s", resource)
