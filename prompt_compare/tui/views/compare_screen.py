"""
Compare Screen for side-by-side prompt comparison.

Shows the selected record's "before" text on the left and "after" text
on the right, with the list of loaded prompts docked on the right edge.
While nothing is loaded, an open zone asks for a file path; a path pasted
into the terminal (what most terminals do when a file is dropped on them)
is accepted as well.
"""

from __future__ import annotations

import shlex
from urllib.parse import unquote, urlparse

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Static

from prompt_compare.data_formats import is_supported_file
from prompt_compare.session import ComparisonSession, ViewMode
from prompt_compare.tui.mixins import DataTableMixin, DualPaneMixin, VimNavigationMixin
from prompt_compare.tui.widgets import TextPanel

EXPECTED_FORMAT_HINT = """\
Expected CSV format:
  before,after
  "# Old prompt...","# New prompt..."
"""


def path_from_paste(text: str) -> str | None:
    """Extract a file path from pasted terminal text.

    Terminals paste dropped files as a path that may be quoted, have
    backslash-escaped spaces, or be a file:// URL.

    Args:
        text: Pasted text.

    Returns:
        The path, or None if the paste is empty.

    Examples:
        >>> path_from_paste("'/tmp/my prompts.csv'\\n")
        '/tmp/my prompts.csv'
        >>> path_from_paste("file:///tmp/a%20b.csv")
        '/tmp/a b.csv'
    """
    text = text.strip()
    if not text:
        return None

    try:
        parts = shlex.split(text)
    except ValueError:
        parts = [text]
    if not parts:
        return None

    path = parts[0]
    if path.startswith("file://"):
        path = unquote(urlparse(path).path)
    return path


class CompareScreen(DataTableMixin, DualPaneMixin, VimNavigationMixin, Screen):
    """Side-by-side before/after view over a ComparisonSession.

    The screen never loads files itself; it posts FileRequested and the
    app replaces the session contents, then calls refresh_session().
    """

    CSS = """
    CompareScreen {
        layout: vertical;
    }

    #open-zone {
        height: 1fr;
        align: center middle;
    }

    #open-box {
        width: 80;
        height: auto;
        border: dashed $primary;
        background: $boost;
        padding: 1 2;
    }

    #open-title {
        text-align: center;
        text-style: bold;
    }

    #open-subtitle {
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #format-hint {
        margin-top: 1;
        color: $warning;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #compare-view {
        height: 1fr;
    }

    #left-panel, #right-panel {
        width: 1fr;
        border: solid $primary-darken-2;
    }

    #left-panel.active, #right-panel.active {
        border: solid $secondary;
    }

    .panel-header {
        height: 1;
        padding: 0 1;
        text-style: bold;
        background: $surface;
    }

    #before-header {
        color: $error;
    }

    #after-header {
        color: $success;
    }

    #prompt-sidebar {
        width: 40;
        border-left: solid $primary;
    }

    #sidebar-header {
        height: 1;
        padding: 0 1;
        color: $text-muted;
        text-style: bold;
    }

    #prompt-table {
        height: 1fr;
    }

    #status-bar {
        height: 1;
        background: $primary-darken-2;
        padding: 0 1;
    }

    #status-left {
        width: 1fr;
        color: $text-muted;
    }

    #status-right {
        width: auto;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("v", "toggle_view", "Rendered/Raw"),
        Binding("n", "next_record", "Next"),
        Binding("p", "previous_record", "Previous"),
        Binding("o", "open_file", "Open"),
        Binding("R", "reset", "Reset"),
        Binding("escape", "close_open_zone", "Close", show=False),
    ]

    class FileRequested(Message):
        """Posted when the user asks to load a file."""

        def __init__(self, path: str) -> None:
            self.path = path
            super().__init__()

    def __init__(
        self,
        session: ComparisonSession,
        initial_path: str | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the CompareScreen.

        Args:
            session: The session to display and mutate.
            initial_path: File to request once the screen is mounted.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._session = session
        self._initial_path = initial_path
        self._open_zone_requested = False

    @property
    def session(self) -> ComparisonSession:
        return self._session

    def compose(self) -> ComposeResult:
        """Compose the open zone and the side-by-side layout."""
        yield Header()
        with Vertical(id="open-zone"):
            with Vertical(id="open-box"):
                yield Static("Open a CSV file", id="open-title")
                yield Static(
                    "Type or paste a path, or drop a file onto the terminal",
                    id="open-subtitle",
                )
                yield Input(placeholder="path/to/prompts.csv", id="path-input")
                yield Static(EXPECTED_FORMAT_HINT, id="format-hint")
        with Horizontal(id="compare-view"):
            with Vertical(id="left-panel", classes="active"):
                yield Static("● BEFORE", id="before-header", classes="panel-header")
                yield TextPanel(id="left-text")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static("● AFTER", id="after-header", classes="panel-header")
                yield TextPanel(id="right-text")
            with Vertical(id="prompt-sidebar"):
                yield Static("PROMPTS", id="sidebar-header")
                yield DataTable(id="prompt-table")
        with Horizontal(id="status-bar"):
            yield Static("Prompt Compare Tool", id="status-left")
            yield Static("", id="status-right")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#prompt-table", DataTable)
        self._configure_table(table, [("#", 4), ("PROMPT", None)])
        self.refresh_session()

        # Columns exist from here on, so records can be added
        if self._initial_path:
            self.post_message(self.FileRequested(self._initial_path))

    # -- Rendering -------------------------------------------------------

    def refresh_session(self) -> None:
        """Redraw everything from the session after load or reset."""
        self._open_zone_requested = False
        self._populate_table()
        self._update_layout()
        self._show_current()

        if self._session.has_records:
            self.query_one("#prompt-table", DataTable).focus()
        else:
            self.query_one("#path-input", Input).focus()

    def _populate_table(self) -> None:
        table = self.query_one("#prompt-table", DataTable)
        table.clear()
        for record in self._session.records:
            cell = Text(record.title, style="bold")
            cell.append("\n")
            cell.append(record.preview(), style="dim")
            table.add_row(str(record.id + 1), cell, height=2, key=str(record.id))

    def _update_layout(self) -> None:
        has_records = self._session.has_records
        show_open_zone = not has_records or self._open_zone_requested
        self.query_one("#open-zone").display = show_open_zone
        self.query_one("#compare-view").display = has_records and not show_open_zone

        if has_records:
            self.sub_title = (
                f"{self._session.record_count} prompts loaded"
                f" · {self._session.view_mode.value}"
            )
        else:
            self.sub_title = ""

    def _show_current(self) -> None:
        """Show the current record in both panels; absent record shows empty."""
        record = self._session.current
        mode = self._session.view_mode
        before = record.before if record is not None else ""
        after = record.after if record is not None else ""

        self.query_one("#left-text", TextPanel).show(before, mode)
        self.query_one("#right-text", TextPanel).show(after, mode)
        self.query_one("#status-right", Static).update(self._session.position_label)

    def _select(self, index: int) -> None:
        """Select a record and sync the table cursor."""
        if not self._session.is_valid_index(index):
            return
        changed = index != self._session.selected_index
        self._session.select(index)
        table = self.query_one("#prompt-table", DataTable)
        if table.cursor_row != index:
            table.move_cursor(row=index)
        if changed:
            self._show_current()

    def _focus_active_widget(self) -> None:
        if not self._session.has_records:
            return
        self.query_one(f"#{self._active_panel}-text", TextPanel).focus()

    # -- Actions ---------------------------------------------------------

    def action_toggle_view(self) -> None:
        """Switch between rendered Markdown and raw text."""
        if self._session.view_mode is ViewMode.RENDERED:
            self._session.set_view_mode(ViewMode.RAW)
        else:
            self._session.set_view_mode(ViewMode.RENDERED)
        self._update_layout()
        self._show_current()

    def action_next_record(self) -> None:
        self._select(self._session.selected_index + 1)

    def action_previous_record(self) -> None:
        self._select(self._session.selected_index - 1)

    def action_open_file(self) -> None:
        """Show the open zone and focus the path input."""
        self._open_zone_requested = True
        self._update_layout()
        self.query_one("#path-input", Input).focus()

    def action_close_open_zone(self) -> None:
        if not self._open_zone_requested:
            return
        self._open_zone_requested = False
        self._update_layout()
        self.query_one("#prompt-table", DataTable).focus()

    def action_reset(self) -> None:
        """Drop all loaded records and return to the open zone."""
        self._session.reset()
        self.refresh_session()

    # -- Events ----------------------------------------------------------

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Follow the table cursor."""
        index = self._get_row_index(event)
        if index is not None:
            self._select(index)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Request the typed path."""
        path = path_from_paste(event.value)
        if path is None:
            return
        event.input.value = ""
        self.post_message(self.FileRequested(path))

    def on_paste(self, event: events.Paste) -> None:
        """Treat a pasted path (terminal drag-and-drop) as an open request."""
        if isinstance(self.focused, Input):
            return
        path = path_from_paste(event.text)
        if path is None or not is_supported_file(path):
            self.log(f"Ignoring paste, not a supported file: {event.text!r}")
            return
        self.post_message(self.FileRequested(path))
