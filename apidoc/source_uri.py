"""Logic for building links to a var's source code."""

import logging
import re
import subprocess
from collections.abc import Callable

from apidoc.project import Project
from apidoc.var_info import VarInfo

logger = logging.getLogger(__name__)


def uri_path(path: str) -> str:
    """Normalize a filesystem path to forward slashes."""
    return path.replace("\\", "/")


def uri_basename(path: str) -> str:
    """Return the final segment of a slash-separated path."""
    return path.rsplit("/", 1)[-1]


def get_source_uri(source_uris: dict[str, str], path: str) -> str | None:
    """Pick the template of the first regex that matches ``path``."""
    for pattern, template in source_uris.items():
        if re.search(pattern, path):
            return template
    return None


def current_git_commit() -> str:
    """Return the commit hash of the working directory's checkout."""
    result = subprocess.run(
        ["git", "rev-parse", "HEAD"],
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def _force_replace(s: str, match: str, replacement: Callable[[], str]) -> str:
    if match in s:
        return s.replace(match, replacement())
    return s


def var_source_uri(project: Project, var: VarInfo) -> str | None:
    """Fill in the project's source URI template for a var."""
    path = uri_path(var.path or "")
    source_uri = project.source_uri
    uri = get_source_uri(source_uri, path) if isinstance(source_uri, dict) else source_uri
    if uri is None:
        logger.warning("No source URI pattern matches %s", path)
        return None
    uri = (
        uri.replace("{filepath}", path)
        .replace("{classpath}", uri_path(var.file or ""))
        .replace("{basename}", uri_basename(path))
        .replace("{line}", str(var.line or ""))
        .replace("{version}", project.version)
    )
    return _force_replace(
        uri, "{git-commit}", lambda: project.git_commit or current_git_commit()
    )
