"""TUI widgets for the Prompt Compare viewer."""

from prompt_compare.tui.widgets.text_panel import TextPanel

__all__ = ["TextPanel"]
