"""Main dashboard view combining the tab bar and the per-tab panels."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import ContentSwitcher, Footer, Header

from devflow.navigation import NavigationState, Tab
from devflow.render import PLACEHOLDERS
from devflow.theme import Palette
from devflow.views.project_detail import ProjectDetailPanel
from devflow.views.widgets import (
    ErrorPanel,
    PlaceholderPanel,
    ProjectListPanel,
    TabBar,
)


class DashboardScreen(Screen):
    """Main dashboard screen.

    Holds no state of its own: `show` redraws every panel from the shared
    NavigationState.
    """

    DEFAULT_CSS = """
    DashboardScreen {
        background: $background;
    }

    #content {
        height: 1fr;
    }

    #projects {
        height: 100%;
    }
    """

    def __init__(self, state: NavigationState, palette: Palette, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state = state
        self._palette = palette

    def compose(self) -> ComposeResult:
        yield Header()
        yield TabBar()
        yield ErrorPanel()

        with ContentSwitcher(initial=Tab.PROJECTS.value, id="content"):
            with Horizontal(id=Tab.PROJECTS.value):
                yield ProjectListPanel()
                yield ProjectDetailPanel()
            for tab in PLACEHOLDERS:
                yield PlaceholderPanel(tab, id=tab.value)

        yield Footer()

    def on_mount(self) -> None:
        self.show()

    def show(self) -> None:
        """Redraw from the current state."""
        state = self._state
        self.query_one(TabBar).show(state.active_tab, self._palette)

        error_panel = self.query_one(ErrorPanel)
        content = self.query_one("#content", ContentSwitcher)
        if state.error is not None:
            error_panel.show(state.error, self._palette)
            error_panel.display = True
            content.display = False
            return

        error_panel.display = False
        content.display = True
        content.current = state.active_tab.value

        self.query_one(ProjectListPanel).show(
            state.projects, self._palette, state.viewport.height
        )
        self.query_one(ProjectDetailPanel).show(
            state.projects.selected_project, self._palette
        )
        for panel in self.query(PlaceholderPanel):
            panel.show(self._palette)
