"""
Renderers turning navigation state into styled text.

Every function here is pure: it reads state and returns a Rich `Text`,
which the widgets display as-is. Nothing in this module mutates state.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rich.text import Text

from devflow.navigation import TAB_ORDER, ProjectsState, Tab
from devflow.providers import Project
from devflow.theme import DEFAULT_PALETTE, Palette

# Lines taken by header, tab bar, footer and panel borders
CHROME_LINES = 11
LINES_PER_ROW = 2

CURSOR_MARK = "❯ "
NO_CURSOR = "  "

PLACEHOLDERS = {
    Tab.GIT: ("🔀 Git", "Coming soon: git status and operations"),
    Tab.BUILD: ("🔨 Build", "Coming soon: build monitoring"),
    Tab.TASKS: ("📋 Tasks", "Coming soon: task management"),
}


def format_time_ago(ts: datetime | None, now: datetime | None = None) -> str:
    """Format timestamp as 'X ago'."""
    if ts is None:
        return "—"
    if now is None:
        now = datetime.now(timezone.utc)
    total_seconds = abs(int((now - ts).total_seconds()))
    if total_seconds < 60:
        return f"{total_seconds}s ago"
    elif total_seconds < 3600:
        return f"{total_seconds // 60}m ago"
    elif total_seconds < 86400:
        return f"{total_seconds // 3600}h ago"
    else:
        return f"{total_seconds // 86400}d ago"


def visible_window(cursor: int, total: int, capacity: int) -> tuple[int, int]:
    """Slice [start, end) of rows to show so the cursor stays on screen."""
    capacity = max(capacity, 1)
    if total <= capacity:
        return 0, total
    start = min(max(cursor - capacity + 1, 0), total - capacity)
    return start, start + capacity


def row_capacity(height: int) -> int:
    """How many project rows fit in a terminal of the given height."""
    return max((height - CHROME_LINES) // LINES_PER_ROW, 1)


def render_tab_bar(active: Tab, palette: Palette = DEFAULT_PALETTE) -> Text:
    text = Text()
    for i, tab in enumerate(TAB_ORDER, start=1):
        label = f" [{i}] {tab.title} "
        if tab is active:
            text.append(label, style=f"bold {palette.base} on {palette.primary}")
        else:
            text.append(label, style=palette.text_secondary)
        if i < len(TAB_ORDER):
            text.append(" ")
    return text


def render_project_row(
    project: Project,
    is_cursor: bool,
    is_selected: bool,
    palette: Palette = DEFAULT_PALETTE,
    now: datetime | None = None,
) -> Text:
    """Two lines: the name, then icon • language • status • files • age."""
    row = Text()
    if is_cursor:
        row.append(CURSOR_MARK, style=f"bold {palette.primary}")
    else:
        row.append(NO_CURSOR)

    if is_selected:
        row.append(project.name, style=f"bold {palette.base} on {palette.primary}")
    else:
        row.append(project.name, style=palette.text_primary)

    files = f"{project.file_count} file{'s' if project.file_count != 1 else ''}"
    details = " • ".join(
        [
            project.icon,
            project.language,
            project.status.value,
            files,
            format_time_ago(project.modified_at, now),
        ]
    )
    row.append("\n    ")
    row.append(details, style=f"italic {palette.text_secondary}")
    return row


def render_projects(
    state: ProjectsState,
    palette: Palette = DEFAULT_PALETTE,
    height: int = 24,
    now: datetime | None = None,
) -> Text:
    """Body of the Projects tab."""
    if state.loading:
        return Text("Scanning for projects...", style=f"italic {palette.info}")

    if not state.projects:
        return Text(
            "No projects found.\n\nPress 'r' to scan again.",
            style=f"italic {palette.text_secondary}",
        )

    total = len(state.projects)
    start, end = visible_window(state.cursor, total, row_capacity(height))

    rows = [
        render_project_row(
            state.projects[i],
            is_cursor=i == state.cursor,
            is_selected=i == state.selected,
            palette=palette,
            now=now,
        )
        for i in range(start, end)
    ]
    text = Text("\n").join(rows)
    if end - start < total:
        text.append(
            f"\n\n{start + 1}-{end} of {total}", style=f"italic {palette.text_tertiary}"
        )
    return text


def render_project_detail(
    project: Project | None,
    palette: Palette = DEFAULT_PALETTE,
    now: datetime | None = None,
) -> Text:
    """Detail panel for the selected project."""
    if project is None:
        return Text("No project selected", style=f"italic {palette.text_secondary}")

    modified = "—"
    if project.modified_at is not None:
        modified = (
            f"{format_time_ago(project.modified_at, now)} "
            f"({project.modified_at:%Y-%m-%d %H:%M})"
        )

    text = Text()
    text.append(f"{project.icon} {project.name}\n\n", style=f"bold {palette.primary}")
    for label, value in (
        ("Path", project.path),
        ("Type", project.language),
        ("Status", project.status.value),
        ("Git", "yes" if project.has_git else "no"),
        ("Files", str(project.file_count)),
        ("Modified", modified),
    ):
        text.append(f"{label + ':':<10}", style=palette.text_tertiary)
        text.append(f"{value}\n", style=palette.text_primary)
    text.rstrip()
    return text


def render_placeholder(tab: Tab, palette: Palette = DEFAULT_PALETTE) -> Text:
    title, body = PLACEHOLDERS[tab]
    text = Text(title, style=f"bold {palette.primary}")
    text.append(f"\n\n{body}", style=palette.text_primary)
    return text


def render_error(message: str, palette: Palette = DEFAULT_PALETTE) -> Text:
    return Text(f"Error: {message}", style=f"bold {palette.error}")
