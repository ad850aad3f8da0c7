"""
Vim Navigation Mixin for global vim-style keybindings.

Provides j/k/g/G navigation that works across the compare screen by
delegating to the currently focused widget: the prompt table moves its
row cursor, a text panel scrolls.

Note: h/l bindings for panel switching are defined in DualPaneMixin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.widgets import DataTable

if TYPE_CHECKING:
    from textual.widget import Widget


class VimNavigationMixin:
    """Mixin providing global vim-style navigation keybindings.

    This mixin adds vim keybindings that delegate to the focused widget:
    - j/k: Move cursor down/up (DataTable) or scroll (text panels)
    - g: Jump to first row / top
    - G: Jump to last row / bottom

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_navigable_widget(self) -> Widget | None:
        """Return the focused widget if it is a DataTable or scrollable panel."""
        focused = self.focused
        if isinstance(focused, (DataTable, ScrollableContainer)):
            return focused
        return None

    def action_vim_down(self) -> None:
        """Move cursor down (vim j key)."""
        widget = self._get_navigable_widget()
        if isinstance(widget, DataTable):
            widget.action_cursor_down()
        elif widget is not None:
            widget.scroll_down()

    def action_vim_up(self) -> None:
        """Move cursor up (vim k key)."""
        widget = self._get_navigable_widget()
        if isinstance(widget, DataTable):
            widget.action_cursor_up()
        elif widget is not None:
            widget.scroll_up()

    def action_vim_top(self) -> None:
        """Jump to first item (vim g)."""
        widget = self._get_navigable_widget()
        if isinstance(widget, DataTable):
            if widget.row_count > 0:
                widget.move_cursor(row=0)
        elif widget is not None:
            widget.scroll_home()

    def action_vim_bottom(self) -> None:
        """Jump to last item (vim G)."""
        widget = self._get_navigable_widget()
        if isinstance(widget, DataTable):
            if widget.row_count > 0:
                widget.move_cursor(row=widget.row_count - 1)
        elif widget is not None:
            widget.scroll_end()
