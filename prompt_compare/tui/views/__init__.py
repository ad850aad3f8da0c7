"""TUI views for the Prompt Compare viewer."""

from prompt_compare.tui.views.compare_screen import CompareScreen, path_from_paste

__all__ = ["CompareScreen", "path_from_paste"]
