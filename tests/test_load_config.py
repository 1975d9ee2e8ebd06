"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from apidoc.deep_merge import deep_merge
from apidoc.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"html": {"x": 1, "y": 2}}, {"html": {"y": 3}})
    assert merged == {"html": {"x": 1, "y": 3}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"themes": ["a"]}, {"themes": ["b"]}) == {"themes": ["b"]}


def test_deep_merge_transforms_additive() -> None:
    """Verify that transform lists accumulate in declaration order."""
    base = {"html": {"transforms": [["head", "append", "1"]]}}
    update = {"html": {"transforms": [["body", "append", "2"]]}}
    merged = deep_merge(base, update)
    assert merged["html"]["transforms"] == [["head", "append", "1"], ["body", "append", "2"]]


def test_deep_merge_does_not_mutate() -> None:
    """Verify the inputs are left untouched."""
    base = {"html": {"transforms": []}}
    deep_merge(base, {"html": {"transforms": [["a", "append", "b"]]}})
    assert base == {"html": {"transforms": []}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG
    assert config["themes"] == ["default"]


def test_load_config_with_files(tmp_path: Path) -> None:
    """Verify later files override earlier ones."""
    project_file = tmp_path / "project.yml"
    project_file.write_text(
        yaml.safe_dump({"name": "demo", "version": "1.0", "html": {"namespace_list": "flat"}}),
        encoding="utf-8",
    )
    override = tmp_path / "override.yml"
    override.write_text(yaml.safe_dump({"version": "2.0"}), encoding="utf-8")

    config = load_config(project_file, override)
    assert config["name"] == "demo"
    assert config["version"] == "2.0"
    assert config["html"]["namespace_list"] == "flat"
    assert config["html"]["transforms"] == []


def test_load_config_missing_file_is_skipped(tmp_path: Path) -> None:
    """Verify a nonexistent override file leaves the defaults alone."""
    assert load_config(tmp_path / "absent.yml") == DEFAULT_CONFIG
