"""Tests for theme lookup, parameters and resources."""

from pathlib import Path

import pytest

from apidoc.errors import ThemeNotFoundError
from apidoc.project import Project
from apidoc.themes import (
    apply_theme_transforms,
    copy_theme_resources,
    insert_params,
    read_theme,
    theme_name,
    theme_params,
    theme_path,
)


def _write_theme(root: Path, name: str, body: str) -> Path:
    theme_dir = root / name
    theme_dir.mkdir(parents=True)
    (theme_dir / "theme.yml").write_text(body, encoding="utf-8")
    return theme_dir


def test_theme_reference_parts() -> None:
    """Verify themes can be given by name or as [name, params]."""
    assert theme_name("default") == "default"
    assert theme_params("default") == {}
    assert theme_name(["dark", {"accent": "red"}]) == "dark"
    assert theme_params(["dark", {"accent": "red"}]) == {"accent": "red"}


def test_default_theme_is_bundled() -> None:
    """Verify the default theme ships a stylesheet transform."""
    path = theme_path("default")
    assert path is not None
    assert (path / "css" / "default.css").is_file()
    data = read_theme("default")
    assert data["transforms"] == [
        ["head", "append", '<link rel="stylesheet" type="text/css" href="css/default.css">']
    ]


def test_params_override_defaults() -> None:
    """Verify theme parameters replace default values."""
    data = read_theme(["default", {"stylesheet": "custom.css"}])
    assert 'href="custom.css"' in data["transforms"][0][2]
    assert "defaults" not in data


def test_unknown_placeholders_are_kept() -> None:
    """Verify placeholders without a value are left as written."""
    data = insert_params({"transforms": [["body", "append", "${missing}"]]}, "t")
    assert data["transforms"][0][2] == "${missing}"


def test_params_must_be_a_map() -> None:
    """Verify non-mapping parameters are rejected."""
    with pytest.raises(TypeError, match="Theme parameters must be a map"):
        insert_params({}, ["default", ["not", "a", "map"]])


def test_user_theme_paths_are_searched_first(tmp_path: Path) -> None:
    """Verify a theme in a user directory shadows a bundled one."""
    _write_theme(tmp_path, "default", "transforms:\n  - [body, append, '<i>mine</i>']\n")
    data = read_theme("default", (str(tmp_path),))
    assert data["transforms"] == [["body", "append", "<i>mine</i>"]]


def test_missing_theme() -> None:
    """Verify an unknown theme fails with its name."""
    project = Project(name="p", themes=("no-such-theme",))
    with pytest.raises(ThemeNotFoundError, match="Could not find theme: no-such-theme"):
        apply_theme_transforms(project)


def test_theme_transforms_follow_project_transforms(tmp_path: Path) -> None:
    """Verify theme transforms are appended in theme order."""
    _write_theme(tmp_path, "one", "transforms:\n  - [body, append, '1']\n")
    _write_theme(tmp_path, "two", "transforms:\n  - [body, append, '2']\n")
    project = Project(
        name="p",
        themes=("one", "two"),
        theme_paths=(str(tmp_path),),
        transforms=(("head", "append", "0"),),
    )
    themed = apply_theme_transforms(project)
    assert [t[2] for t in themed.transforms] == ["0", "1", "2"]


def test_copy_resources(tmp_path: Path) -> None:
    """Verify declared resources are copied into the output directory."""
    theme_dir = _write_theme(tmp_path / "themes", "pretty", "resources:\n  - js/app.js\n")
    (theme_dir / "js").mkdir()
    (theme_dir / "js" / "app.js").write_text("// app", encoding="utf-8")
    out = tmp_path / "out"
    project = Project(
        name="p", themes=("pretty",), theme_paths=(str(tmp_path / "themes"),)
    )
    copy_theme_resources(out, project)
    assert (out / "js" / "app.js").read_text(encoding="utf-8") == "// app"
