"""
TextPanel widget for displaying one side of a prompt pair.

Shows the text either rendered as Markdown or verbatim, depending on the
session's view mode.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Markdown, Static

from prompt_compare.session import ViewMode


class TextPanel(VerticalScroll):
    """Scrollable panel holding a Markdown view and a raw text view.

    Only one of the two child widgets is displayed at a time.
    """

    DEFAULT_CSS = """
    TextPanel {
        height: 1fr;
        padding: 0 1;
    }

    TextPanel > .raw-text {
        width: 100%;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._text = ""
        self._mode = ViewMode.RENDERED

    @property
    def text(self) -> str:
        """Text currently shown."""
        return self._text

    @property
    def mode(self) -> ViewMode:
        """Display mode currently applied."""
        return self._mode

    def compose(self) -> ComposeResult:
        yield Markdown("", classes="rendered-text")
        yield Static("", classes="raw-text")

    def on_mount(self) -> None:
        self._apply()

    def show(self, text: str, mode: ViewMode) -> None:
        """Display text in the given mode.

        Args:
            text: Text to display; empty string clears the panel.
            mode: RENDERED for Markdown, RAW for verbatim text.
        """
        changed = text != self._text
        self._text = text
        self._mode = mode
        self._apply()
        if changed:
            self.scroll_home(animate=False)

    def _apply(self) -> None:
        try:
            markdown = self.query_one(".rendered-text", Markdown)
            raw = self.query_one(".raw-text", Static)
        except NoMatches:
            return  # Not composed yet; on_mount applies the state

        rendered = self._mode is ViewMode.RENDERED
        markdown.display = rendered
        raw.display = not rendered
        if rendered:
            markdown.update(self._text)
        else:
            raw.update(Text(self._text))
