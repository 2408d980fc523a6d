"""Tests for project_provider.py - classification and discovery."""

import os
from datetime import datetime
from pathlib import Path

import pytest

from devflow.config import DiscoveryConfig
from devflow.project_provider import (
    FileProjectProvider,
    classify,
    classify_entries,
    derive_status,
    describe,
    discover,
)
from devflow.providers import ProjectStatus, ProjectType


def make_dir(path: Path, *files: str) -> Path:
    """Create a directory containing the given (empty) files."""
    path.mkdir(parents=True, exist_ok=True)
    for name in files:
        (path / name).write_text("")
    return path


def make_git(path: Path) -> None:
    (path / ".git").mkdir(parents=True, exist_ok=True)


@pytest.fixture
def config_for(tmp_path: Path):
    def _config(*roots: Path, max_depth: int = 3) -> DiscoveryConfig:
        return DiscoveryConfig(
            search_paths=tuple(str(r) for r in roots) or (str(tmp_path),),
            max_depth=max_depth,
        )

    return _config


class TestClassifyEntries:
    """Tests for the marker decision table."""

    @pytest.mark.parametrize(
        "marker,expected",
        [
            ("package.json", ProjectType.NODEJS),
            ("go.mod", ProjectType.GO),
            ("Cargo.toml", ProjectType.CARGO),
            ("pyproject.toml", ProjectType.PYTHON),
            ("requirements.txt", ProjectType.PYTHON),
            ("setup.py", ProjectType.PYTHON),
            ("Makefile", ProjectType.MAKEFILE),
            ("makefile", ProjectType.MAKEFILE),
            (".git", ProjectType.GIT_REPO),
        ],
    )
    def test_single_marker(self, marker: str, expected: ProjectType) -> None:
        assert classify_entries([marker, "README.md"]) is expected

    def test_package_json_beats_go_mod(self) -> None:
        assert classify_entries(["go.mod", "package.json"]) is ProjectType.NODEJS

    def test_go_mod_beats_cargo(self) -> None:
        assert classify_entries(["Cargo.toml", "go.mod"]) is ProjectType.GO

    def test_python_beats_makefile_and_git(self) -> None:
        names = [".git", "Makefile", "setup.py"]
        assert classify_entries(names) is ProjectType.PYTHON

    def test_makefile_beats_git(self) -> None:
        assert classify_entries([".git", "Makefile"]) is ProjectType.MAKEFILE

    def test_no_markers_is_unknown(self) -> None:
        assert classify_entries(["main.c", "notes.txt"]) is ProjectType.UNKNOWN

    def test_empty_is_unknown(self) -> None:
        assert classify_entries([]) is ProjectType.UNKNOWN


class TestClassify:
    """Tests for classify on real directories."""

    def test_reads_directory(self, tmp_path: Path) -> None:
        make_dir(tmp_path / "app", "go.mod")
        assert classify(tmp_path / "app") is ProjectType.GO

    def test_missing_directory_is_unknown(self, tmp_path: Path) -> None:
        assert classify(tmp_path / "nope") is ProjectType.UNKNOWN

    def test_file_is_unknown(self, tmp_path: Path) -> None:
        target = tmp_path / "package.json"
        target.write_text("{}")
        assert classify(target) is ProjectType.UNKNOWN

    def test_marker_directory_counts(self, tmp_path: Path) -> None:
        """Markers are matched by entry name, files or directories alike."""
        make_git(tmp_path / "repo")
        assert classify(tmp_path / "repo") is ProjectType.GIT_REPO


class TestDeriveStatus:
    """Tests for derive_status function."""

    def test_git_wins(self) -> None:
        assert derive_status(True, 0) is ProjectStatus.GIT_REPO
        assert derive_status(True, 12) is ProjectStatus.GIT_REPO

    def test_files_make_active(self) -> None:
        assert derive_status(False, 3) is ProjectStatus.ACTIVE

    def test_nothing_is_empty(self) -> None:
        assert derive_status(False, 0) is ProjectStatus.EMPTY


class TestDescribe:
    """Tests for describe function."""

    def test_cargo_project(self, tmp_path: Path) -> None:
        path = make_dir(tmp_path / "myapp", "Cargo.toml")

        project = describe(path)

        assert project.name == "myapp"
        assert project.path == str(path)
        assert project.project_type is ProjectType.CARGO
        assert project.language == "Rust"
        assert project.has_git is False
        assert project.file_count == 1
        assert project.status is ProjectStatus.ACTIVE
        assert isinstance(project.modified_at, datetime)

    def test_counts_files_not_directories(self, tmp_path: Path) -> None:
        path = make_dir(tmp_path / "web", "package.json", "index.js")
        (path / "src").mkdir()

        project = describe(path)

        assert project.file_count == 2

    def test_git_directory_sets_status(self, tmp_path: Path) -> None:
        path = make_dir(tmp_path / "svc", "go.mod")
        make_git(path)

        project = describe(path)

        assert project.has_git is True
        assert project.project_type is ProjectType.GO
        assert project.status is ProjectStatus.GIT_REPO

    def test_empty_git_repo(self, tmp_path: Path) -> None:
        path = tmp_path / "bare"
        make_git(path)

        project = describe(path)

        assert project.file_count == 0
        assert project.project_type is ProjectType.GIT_REPO
        assert project.status is ProjectStatus.GIT_REPO

    def test_uses_given_type(self, tmp_path: Path) -> None:
        path = make_dir(tmp_path / "x", "package.json")
        project = describe(path, ProjectType.GO)
        assert project.project_type is ProjectType.GO

    def test_missing_path_degrades_to_defaults(self, tmp_path: Path) -> None:
        project = describe(tmp_path / "gone")

        assert project.name == "gone"
        assert project.project_type is ProjectType.UNKNOWN
        assert project.modified_at is None
        assert project.file_count == 0
        assert project.has_git is False
        assert project.status is ProjectStatus.EMPTY

    def test_current_directory_named_after_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        make_dir(tmp_path / "here", "setup.py")
        monkeypatch.chdir(tmp_path / "here")

        project = describe(".")

        assert project.name == "here"
        assert project.path == "."


class TestDiscover:
    """Tests for discover function."""

    def test_finds_projects_in_walk_order(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path / "alpha", "package.json")
        make_dir(tmp_path / "beta", "go.mod")
        make_dir(tmp_path / "beta" / "tools", "Makefile")

        projects = discover(config_for(tmp_path))

        assert [p.name for p in projects] == ["alpha", "beta", "tools"]
        assert [p.project_type for p in projects] == [
            ProjectType.NODEJS,
            ProjectType.GO,
            ProjectType.MAKEFILE,
        ]

    def test_root_itself_is_classified(self, tmp_path: Path, config_for) -> None:
        root = make_dir(tmp_path / "root", "pyproject.toml")

        projects = discover(config_for(root))

        assert [p.path for p in projects] == [str(root)]

    def test_unknown_directories_excluded(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path / "docs", "index.md")
        make_dir(tmp_path / "app", "Cargo.toml")

        projects = discover(config_for(tmp_path))

        assert [p.name for p in projects] == ["app"]
        assert all(p.project_type is not ProjectType.UNKNOWN for p in projects)

    @pytest.mark.parametrize(
        "pruned", [".hidden", ".venv", "node_modules", "target", "build", "dist"]
    )
    def test_pruned_directories_never_entered(
        self, tmp_path: Path, config_for, pruned: str
    ) -> None:
        make_dir(tmp_path / pruned, "package.json")
        make_dir(tmp_path / pruned / "inner", "go.mod")

        projects = discover(config_for(tmp_path))

        assert projects == []

    def test_depth_limit_relative_to_root(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path / "a" / "b" / "c", "go.mod")
        make_dir(tmp_path / "a" / "b" / "c" / "d", "go.mod")

        projects = discover(config_for(tmp_path))

        assert [p.name for p in projects] == ["c"]

    def test_max_depth_zero_only_checks_root(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path, "Makefile")
        make_dir(tmp_path / "child", "go.mod")

        projects = discover(config_for(tmp_path, max_depth=0))

        assert [p.path for p in projects] == [str(tmp_path)]

    def test_missing_root_skipped(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path / "real" / "app", "go.mod")

        projects = discover(config_for(tmp_path / "missing", tmp_path / "real"))

        assert [p.name for p in projects] == ["app"]

    def test_overlapping_roots_not_deduplicated(
        self, tmp_path: Path, config_for
    ) -> None:
        make_dir(tmp_path / "outer" / "app", "go.mod")

        projects = discover(config_for(tmp_path / "outer", tmp_path / "outer" / "app"))

        assert [p.name for p in projects] == ["app", "app"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directories_not_followed(
        self, tmp_path: Path, config_for
    ) -> None:
        target = make_dir(tmp_path / "elsewhere" / "app", "go.mod")
        root = make_dir(tmp_path / "root")
        (root / "link").symlink_to(target, target_is_directory=True)

        projects = discover(config_for(root))

        assert projects == []

    def test_idempotent(self, tmp_path: Path, config_for) -> None:
        make_dir(tmp_path / "one", "package.json")
        make_dir(tmp_path / "two", "setup.py")
        config = config_for(tmp_path)

        assert discover(config) == discover(config)

    def test_expands_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        make_dir(tmp_path / "code" / "tool", "go.mod")

        projects = discover(DiscoveryConfig(search_paths=("~/code",)))

        assert [p.name for p in projects] == ["tool"]


class TestFileProjectProvider:
    """Tests for FileProjectProvider."""

    def test_discovers_with_config(self, tmp_path: Path) -> None:
        make_dir(tmp_path / "svc", "go.mod")
        provider = FileProjectProvider(DiscoveryConfig(search_paths=(str(tmp_path),)))

        projects = provider.discover()

        assert [p.name for p in projects] == ["svc"]

    def test_default_config(self) -> None:
        assert FileProjectProvider().config == DiscoveryConfig()
