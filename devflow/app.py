"""
DevFlow TUI application.

Keys, terminal resizes and scan results are all funnelled into the
navigation state machine; the effects it returns are carried out here and
the dashboard is redrawn after every event.
"""

from __future__ import annotations

import asyncio
import logging

from textual import events
from textual.app import App
from textual.binding import Binding
from textual.message import Message

from devflow.config import AppConfig
from devflow.navigation import (
    DiscoveryComplete,
    DiscoveryFailed,
    Effect,
    Event,
    KeyPress,
    NavigationState,
    ProjectSelected,
    Quit,
    Resize,
    StartDiscovery,
    handle_event,
    initial_effects,
)
from devflow.project_provider import FileProjectProvider
from devflow.providers import Project, ProjectProvider
from devflow.theme import DEFAULT_PALETTE, THEME_NAME, Palette, build_theme
from devflow.views.dashboard import DashboardScreen

logger = logging.getLogger(__name__)

# (key, footer description, shown in footer)
KEY_BINDINGS = [
    ("q", "Quit", True),
    ("ctrl+c", "Quit", False),
    ("tab", "Next tab", True),
    ("shift+tab", "Previous tab", False),
    ("l", "Next tab", False),
    ("h", "Previous tab", False),
    ("1", "Projects", False),
    ("2", "Git", False),
    ("3", "Build", False),
    ("4", "Tasks", False),
    ("up", "Up", False),
    ("k", "Up", False),
    ("down", "Down", False),
    ("j", "Down", False),
    ("enter", "Select", True),
    ("space", "Select", False),
    ("r", "Refresh", True),
]


class ProjectsLoaded(Message):
    """A discovery run finished."""

    def __init__(self, projects: list[Project]) -> None:
        super().__init__()
        self.projects = projects


class ScanFailed(Message):
    """A discovery run raised instead of returning."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class DevflowApp(App):
    """Main DevFlow application."""

    TITLE = "DevFlow"
    SUB_TITLE = "v0.1"

    ENABLE_COMMAND_PALETTE = False

    # Priority bindings so Textual's own focus and quit keys never win.
    BINDINGS = [
        Binding(key, f"dispatch_key({key!r})", description, show=show, priority=True)
        for key, description, show in KEY_BINDINGS
    ]

    def __init__(
        self,
        provider: ProjectProvider | None = None,
        palette: Palette = DEFAULT_PALETTE,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._provider = provider or FileProjectProvider()
        self._palette = palette
        self._dashboard: DashboardScreen | None = None
        self.navigation = NavigationState()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(build_theme(self._palette))
        self.theme = THEME_NAME

        self._dashboard = DashboardScreen(self.navigation, self._palette)
        self.push_screen(self._dashboard)
        self._run_effects(initial_effects())

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(Resize(event.size.width, event.size.height))

    def action_dispatch_key(self, key: str) -> None:
        self.apply_event(KeyPress(key))

    def on_projects_loaded(self, message: ProjectsLoaded) -> None:
        self.apply_event(DiscoveryComplete(tuple(message.projects)))

    def on_scan_failed(self, message: ScanFailed) -> None:
        self.apply_event(DiscoveryFailed(message.error))

    def apply_event(self, event: Event) -> None:
        """Feed one event to the state machine, redraw, then run its effects."""
        effects = handle_event(self.navigation, event)
        self._refresh_view()
        self._run_effects(effects)

    def _refresh_view(self) -> None:
        if self._dashboard is not None and self._dashboard.is_mounted:
            self._dashboard.show()

    def _run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, StartDiscovery):
                self.run_worker(self._discover(), name="discovery", group="discovery")
            elif isinstance(effect, ProjectSelected):
                logger.info("Selected project %s", effect.project.path)
                self.notify(effect.project.path, title=f"Selected {effect.project.name}")
            elif isinstance(effect, Quit):
                self.exit()

    async def _discover(self) -> None:
        """Run discovery off the event loop and post the result back."""
        try:
            projects = await asyncio.to_thread(self._provider.discover)
        except Exception as exc:
            logger.exception("Project discovery failed")
            self.post_message(ScanFailed(str(exc) or exc.__class__.__name__))
            return
        self.post_message(ProjectsLoaded(projects))


def run(config: AppConfig | None = None) -> None:
    """Run the TUI application."""
    if config is None:
        config = AppConfig()
    app = DevflowApp(provider=FileProjectProvider(config.discovery))
    app.run()
