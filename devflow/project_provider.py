"""
Concrete implementation of ProjectProvider backed by the local filesystem.

Classification looks only at the immediate entries of a directory; the
walk visits directories only and never writes anything.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from pathlib import Path

from devflow.config import DiscoveryConfig
from devflow.providers import Project, ProjectStatus, ProjectType

logger = logging.getLogger(__name__)

# Checked top to bottom; the first marker present wins.
MARKERS: tuple[tuple[tuple[str, ...], ProjectType], ...] = (
    (("package.json",), ProjectType.NODEJS),
    (("go.mod",), ProjectType.GO),
    (("Cargo.toml",), ProjectType.CARGO),
    (("pyproject.toml", "requirements.txt", "setup.py"), ProjectType.PYTHON),
    (("Makefile", "makefile"), ProjectType.MAKEFILE),
    ((".git",), ProjectType.GIT_REPO),
)


def _list_names(path: str | Path) -> list[str]:
    with os.scandir(path) as entries:
        return [entry.name for entry in entries]


def classify_entries(names: Iterable[str]) -> ProjectType:
    """Map a directory's entry names to a project type."""
    present = set(names)
    for markers, project_type in MARKERS:
        if any(marker in present for marker in markers):
            return project_type
    return ProjectType.UNKNOWN


def classify(path: str | Path) -> ProjectType:
    """Detect the project type of a directory, UNKNOWN if it cannot be read."""
    try:
        names = _list_names(path)
    except OSError:
        return ProjectType.UNKNOWN
    return classify_entries(names)


def _modified_at(path: str | Path) -> datetime | None:
    try:
        mtime = os.stat(path).st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


def _count_files(path: str | Path) -> int:
    try:
        with os.scandir(path) as entries:
            return sum(1 for entry in entries if not _is_dir(entry))
    except OSError:
        return 0


def _is_dir(entry: os.DirEntry, follow_symlinks: bool = True) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def derive_status(has_git: bool, file_count: int) -> ProjectStatus:
    """Status shown in the list; independent of the detected type."""
    if has_git:
        return ProjectStatus.GIT_REPO
    if file_count > 0:
        return ProjectStatus.ACTIVE
    return ProjectStatus.EMPTY


def describe(path: str | Path, project_type: ProjectType | None = None) -> Project:
    """Build a Project for a directory.

    Every field is gathered on its own; a failure in one yields that field's
    default without affecting the others.
    """
    if project_type is None:
        project_type = classify(path)

    file_count = _count_files(path)
    has_git = os.path.exists(os.path.join(path, ".git"))

    return Project(
        name=Path(os.path.abspath(path)).name or str(path),
        path=str(path),
        project_type=project_type,
        has_git=has_git,
        status=derive_status(has_git, file_count),
        modified_at=_modified_at(path),
        file_count=file_count,
    )


def _subdirectories(directory: Path) -> list[Path]:
    try:
        with os.scandir(directory) as entries:
            names = [
                entry.name
                for entry in entries
                if _is_dir(entry, follow_symlinks=False)
            ]
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []
    return [directory / name for name in sorted(names)]


def _walk(directory: Path, config: DiscoveryConfig, depth: int) -> Iterator[Project]:
    project_type = classify(directory)
    if project_type is not ProjectType.UNKNOWN:
        yield describe(directory, project_type)

    if depth >= config.max_depth:
        return

    for child in _subdirectories(directory):
        if config.is_pruned(child.name):
            continue
        yield from _walk(child, config, depth + 1)


def discover(config: DiscoveryConfig | None = None) -> list[Project]:
    """Walk every search root and collect the recognised projects.

    Results keep walk order and are not deduplicated across overlapping
    roots. Missing roots and unreadable subtrees are skipped.
    """
    if config is None:
        config = DiscoveryConfig()

    projects: list[Project] = []
    for root in config.roots():
        if not root.is_dir():
            logger.debug("Skipping missing search root %s", root)
            continue
        found = list(_walk(root, config, 0))
        logger.debug("Found %d projects under %s", len(found), root)
        projects.extend(found)

    logger.info("Discovered %d projects", len(projects))
    return projects


class FileProjectProvider:
    """ProjectProvider implementation that walks the local filesystem."""

    def __init__(self, config: DiscoveryConfig | None = None):
        self._config = config or DiscoveryConfig()

    @property
    def config(self) -> DiscoveryConfig:
        return self._config

    def discover(self) -> list[Project]:
        """Scan the configured search roots."""
        return discover(self._config)
