"""Reusable widgets for the dashboard."""

from textual.widgets import Static

from devflow.navigation import ProjectsState, Tab
from devflow.render import (
    render_error,
    render_placeholder,
    render_projects,
    render_tab_bar,
)
from devflow.theme import Palette


class TabBar(Static):
    """Row of tab labels with the active one highlighted."""

    DEFAULT_CSS = """
    TabBar {
        height: 3;
        border: round $primary;
        padding: 0 1;
    }
    """

    def show(self, active: Tab, palette: Palette) -> None:
        self.update(render_tab_bar(active, palette))


class ProjectListPanel(Static):
    """Scrollable-by-cursor list of discovered projects."""

    DEFAULT_CSS = """
    ProjectListPanel {
        width: 2fr;
        height: 100%;
        border: round $primary;
        padding: 1 2;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "📁 Projects"

    def show(self, state: ProjectsState, palette: Palette, height: int) -> None:
        self.update(render_projects(state, palette, height))
        if state.loading:
            self.border_subtitle = "scanning"
        else:
            self.border_subtitle = f"{len(state.projects)} found"


class PlaceholderPanel(Static):
    """Static content for tabs without backing logic."""

    DEFAULT_CSS = """
    PlaceholderPanel {
        height: 100%;
        border: round $secondary;
        padding: 1 2;
    }
    """

    def __init__(self, tab: Tab, **kwargs) -> None:
        super().__init__(**kwargs)
        self._tab = tab

    def show(self, palette: Palette) -> None:
        self.update(render_placeholder(self._tab, palette))


class ErrorPanel(Static):
    """Replaces all content when a fatal error is set."""

    DEFAULT_CSS = """
    ErrorPanel {
        height: auto;
        border: heavy $error;
        padding: 1 2;
        margin: 1;
    }
    """

    def show(self, message: str, palette: Palette) -> None:
        self.update(render_error(message, palette))
