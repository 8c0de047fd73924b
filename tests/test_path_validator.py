"""Tests for keeping configured paths inside the project root."""

from pathlib import Path

import pytest

from php_autodoc.errors import ConfigurationError, ValidationError
from php_autodoc.path_validator import (
    is_absolute_path,
    is_within_root,
    normalize_segments,
    validate_path,
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root containing an app directory."""
    root = tmp_path / "project"
    (root / "app").mkdir(parents=True)
    return root


def test_existing_relative_path(project: Path) -> None:
    """A relative path inside the root resolves against it."""
    assert validate_path("app", project) == (project / "app").resolve()


def test_missing_output_path_is_accepted(project: Path) -> None:
    """A path that does not exist yet is fine when it would land inside the root."""
    resolved = validate_path("docs/api", project, "Output path")
    assert resolved == (project / "docs" / "api").resolve()


def test_project_root_itself(project: Path) -> None:
    """The root is inside itself."""
    assert validate_path(str(project), project) == project.resolve()


def test_absolute_path_outside_root(project: Path) -> None:
    """System paths outside the root are rejected."""
    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path("/etc/passwd", project)


def test_dotdot_escape_existing(project: Path) -> None:
    """Climbing out of the root to an existing directory is rejected."""
    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path("app/../..", project)


def test_dotdot_escape_missing(project: Path) -> None:
    """Climbing out of the root to a path that does not exist is rejected."""
    with pytest.raises(ValidationError, match="would be created outside the allowed project root"):
        validate_path("../elsewhere/docs", project)


def test_sibling_with_shared_prefix(project: Path) -> None:
    """A sibling whose name starts with the root's name is not inside it."""
    sibling = project.parent / (project.name + "-other")
    sibling.mkdir()
    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path(str(sibling), project)


def test_symlink_escape(project: Path, tmp_path: Path) -> None:
    """A symlink inside the root that points outside is rejected."""
    outside = tmp_path / "outside"
    outside.mkdir()
    link = project / "escape"
    try:
        link.symlink_to(outside, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path("escape", project)
    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path("escape/new/docs", project)


@pytest.mark.parametrize("path", ["", "   "])
def test_empty_path(project: Path, path: str) -> None:
    """Empty and blank paths are rejected with the label."""
    with pytest.raises(ValidationError, match="Output path cannot be empty"):
        validate_path(path, project, "Output path")


def test_null_byte(project: Path) -> None:
    """Embedded NUL bytes are rejected before touching the filesystem."""
    with pytest.raises(ValidationError, match="null byte"):
        validate_path("docs\0.md", project)


def test_missing_project_root(tmp_path: Path) -> None:
    """The project root itself must exist."""
    with pytest.raises(ConfigurationError, match="Project root directory does not exist"):
        validate_path("docs", tmp_path / "nope")


def test_normalize_segments() -> None:
    """Segments collapse; relative ascent above the start is refused."""
    assert normalize_segments("/a/./b//c/../d") == "/a/b/d"
    assert normalize_segments("/..") == "/"
    assert normalize_segments("a/b/..") == "a"
    with pytest.raises(ValidationError, match="traverse above"):
        normalize_segments("a/../../b")


def test_is_absolute_path() -> None:
    """POSIX, drive and UNC paths are absolute."""
    assert is_absolute_path("/srv/app")
    assert is_absolute_path("C:\\project")
    assert is_absolute_path("d:/project")
    assert is_absolute_path("\\\\server\\share")
    assert not is_absolute_path("docs")
    assert not is_absolute_path("./docs")


def test_is_within_root() -> None:
    """Containment is separator-delimited."""
    assert is_within_root("/project", "/project")
    assert is_within_root("/project/docs", "/project/")
    assert not is_within_root("/project2/docs", "/project")


def test_dangling_symlink_escape(project: Path, tmp_path: Path) -> None:
    """A link inside the root whose missing target lies outside is rejected."""
    (tmp_path / "outside").mkdir()
    link = project / "docs"
    try:
        link.symlink_to(tmp_path / "outside" / "newdir", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    with pytest.raises(ValidationError, match="would be created outside the allowed project root"):
        validate_path("docs", project, "Output path")
    with pytest.raises(ValidationError, match="outside the allowed project root"):
        validate_path("docs/api", project, "Output path")
