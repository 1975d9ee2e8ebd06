"""Logic for loading and merging project configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apidoc.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "name": "",
    "version": "",
    "description": None,
    "license": {},
    "package": None,
    "output_path": "target/doc",
    "themes": ["default"],
    "theme_paths": [],
    "default_doc_format": "plaintext",
    "source_uri": None,
    "git_commit": None,
    "languages": [],
    "base_language": None,
    "html": {
        "namespace_list": None,
        "transforms": [],
    },
    "namespaces": [],
    "documents": [],
}


def load_config(*paths: str | Path | None) -> dict[str, Any]:
    """Load YAML files in order and merge each over the defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    for path in paths:
        if not path:
            continue
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
