"""Mixins for the TUI application."""

from prompt_compare.tui.mixins.data_table import DataTableMixin
from prompt_compare.tui.mixins.dual_pane import DualPaneMixin
from prompt_compare.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DataTableMixin",
    "DualPaneMixin",
    "VimNavigationMixin",
]
