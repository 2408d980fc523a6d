"""
Navigation state machine.

All dashboard state lives in a single NavigationState that is mutated in
place by `handle_event`, one event at a time. Side effects the caller has
to carry out (start a scan, announce a selection, quit) are returned as
Effect values instead of being performed here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from devflow.providers import Project

logger = logging.getLogger(__name__)


class Tab(Enum):
    """Top-level views, in cycle order."""

    PROJECTS = "projects"
    GIT = "git"
    BUILD = "build"
    TASKS = "tasks"

    @property
    def title(self) -> str:
        return self.value.capitalize()


TAB_ORDER: tuple[Tab, ...] = tuple(Tab)

QUIT_KEYS = frozenset({"ctrl+c", "q"})
NEXT_TAB_KEYS = frozenset({"tab", "l"})
PREV_TAB_KEYS = frozenset({"shift+tab", "h"})
DIRECT_TAB_KEYS = {str(i + 1): tab for i, tab in enumerate(TAB_ORDER)}
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
ACTIVATE_KEYS = frozenset({"enter", "space", " "})
REFRESH_KEYS = frozenset({"r"})


# Events


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class DiscoveryComplete:
    projects: tuple[Project, ...]


@dataclass(frozen=True)
class DiscoveryFailed:
    message: str


Event = Union[Resize, KeyPress, DiscoveryComplete, DiscoveryFailed]


# Effects


@dataclass(frozen=True)
class StartDiscovery:
    pass


@dataclass(frozen=True)
class ProjectSelected:
    project: Project


@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[StartDiscovery, ProjectSelected, Quit]


# State


@dataclass(frozen=True)
class Viewport:
    width: int = 80
    height: int = 24


@dataclass
class ProjectsState:
    """Sub-state of the Projects tab."""

    projects: list[Project] = field(default_factory=list)
    cursor: int = 0
    selected: int = 0
    loading: bool = True

    @property
    def selected_project(self) -> Project | None:
        if 0 <= self.selected < len(self.projects):
            return self.projects[self.selected]
        return None

    def move_cursor(self, delta: int) -> None:
        last = max(len(self.projects) - 1, 0)
        self.cursor = min(max(self.cursor + delta, 0), last)

    def replace(self, projects: Sequence[Project]) -> None:
        self.projects = list(projects)
        self.loading = False
        self.cursor = 0
        self.selected = 0


@dataclass
class NavigationState:
    active_tab: Tab = Tab.PROJECTS
    viewport: Viewport = field(default_factory=Viewport)
    quitting: bool = False
    error: str | None = None
    projects: ProjectsState = field(default_factory=ProjectsState)

    @property
    def focus_area(self) -> Tab:
        # Kept in lockstep with the active tab.
        return self.active_tab

    def cycle_tab(self, offset: int) -> None:
        index = TAB_ORDER.index(self.active_tab)
        self.active_tab = TAB_ORDER[(index + offset) % len(TAB_ORDER)]


def initial_effects() -> list[Effect]:
    """Effects to run once at startup."""
    return [StartDiscovery()]


def handle_event(state: NavigationState, event: Event) -> list[Effect]:
    """Apply one event to the state and return the effects it requests."""
    if state.quitting:
        return []

    if isinstance(event, Resize):
        state.viewport = Viewport(event.width, event.height)
        return []

    if isinstance(event, KeyPress):
        return _handle_key(state, event.key)

    if isinstance(event, DiscoveryComplete):
        state.projects.replace(event.projects)
        return []

    if isinstance(event, DiscoveryFailed):
        state.projects.loading = False
        state.error = event.message
        return []

    raise TypeError(f"Unsupported event: {event!r}")


def _handle_key(state: NavigationState, key: str) -> list[Effect]:
    if key in QUIT_KEYS:
        state.quitting = True
        return [Quit()]

    if key in NEXT_TAB_KEYS:
        state.cycle_tab(1)
        return []
    if key in PREV_TAB_KEYS:
        state.cycle_tab(-1)
        return []
    if key in DIRECT_TAB_KEYS:
        state.active_tab = DIRECT_TAB_KEYS[key]
        return []

    if state.active_tab is Tab.PROJECTS:
        return _handle_projects_key(state.projects, key)
    return []


def _handle_projects_key(projects: ProjectsState, key: str) -> list[Effect]:
    if key in UP_KEYS:
        projects.move_cursor(-1)
    elif key in DOWN_KEYS:
        projects.move_cursor(1)
    elif key in ACTIVATE_KEYS:
        projects.selected = projects.cursor
        project = projects.selected_project
        if project is not None:
            return [ProjectSelected(project)]
    elif key in REFRESH_KEYS:
        # One scan at a time; a second refresh while loading is dropped.
        if projects.loading:
            logger.debug("Refresh ignored, scan already running")
            return []
        projects.loading = True
        return [StartDiscovery()]
    return []
