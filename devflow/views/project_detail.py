"""Detail panel for the selected project."""

from textual.widgets import Static

from devflow.providers import Project
from devflow.render import render_project_detail
from devflow.theme import Palette


class ProjectDetailPanel(Static):
    """Panel showing everything known about one project."""

    DEFAULT_CSS = """
    ProjectDetailPanel {
        width: 1fr;
        height: 100%;
        border: round $accent;
        padding: 1 2;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Details"

    def show(self, project: Project | None, palette: Palette) -> None:
        self.update(render_project_detail(project, palette))
