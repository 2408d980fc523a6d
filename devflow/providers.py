"""
Data providers for the dashboard.

Protocols define the interface; implementations can be swapped
for testing or alternative data sources.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class ProjectType(Enum):
    """Toolchain detected from marker files."""

    UNKNOWN = "unknown"
    NODEJS = "nodejs"
    GO = "go"
    RUST = "rust"
    PYTHON = "python"
    CARGO = "cargo"
    MAKEFILE = "makefile"
    GIT_REPO = "git"

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]

    @property
    def icon(self) -> str:
        return _TYPE_ICONS.get(self, "📁")


_TYPE_LABELS = {
    ProjectType.UNKNOWN: "Unknown",
    ProjectType.NODEJS: "Node.js",
    ProjectType.GO: "Go",
    ProjectType.RUST: "Rust",
    ProjectType.PYTHON: "Python",
    ProjectType.CARGO: "Rust",
    ProjectType.MAKEFILE: "Make",
    ProjectType.GIT_REPO: "Git",
}

_TYPE_ICONS = {
    ProjectType.NODEJS: "🟢",
    ProjectType.GO: "🐹",
    ProjectType.RUST: "🦀",
    ProjectType.PYTHON: "🐍",
    ProjectType.CARGO: "🦀",
    ProjectType.MAKEFILE: "⚙",
}


class ProjectStatus(Enum):
    """Coarse status shown next to each project."""

    CLEAN = "Clean"
    GIT_REPO = "Git Repo"
    ACTIVE = "Active"
    EMPTY = "Empty"


@dataclass(frozen=True)
class Project:
    """Immutable snapshot of a discovered project directory."""

    name: str
    path: str
    project_type: ProjectType
    has_git: bool
    status: ProjectStatus
    modified_at: datetime | None = None
    file_count: int = 0

    @property
    def language(self) -> str:
        return self.project_type.label

    @property
    def icon(self) -> str:
        return self.project_type.icon


class ProjectProvider(Protocol):
    """Protocol for discovering projects."""

    def discover(self) -> list[Project]:
        """Scan the search roots and return every recognised project."""
        ...
