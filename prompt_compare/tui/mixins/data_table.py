"""
DataTable Mixin for consistent table setup and row key handling.

Provides reusable methods for:
- _configure_table(): Apply configuration to a DataTable
- _get_row_index(): Extract the integer row key from DataTable events
"""

from __future__ import annotations

from textual.widgets import DataTable


class DataTableMixin:
    """Mixin providing consistent DataTable setup and row key handling."""

    def _configure_table(
        self,
        table: DataTable,
        columns: list[tuple[str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = False,
    ) -> None:
        """Apply configuration to a DataTable.

        Args:
            table: The DataTable instance to configure.
            columns: List of (column_name, width) tuples. Width can be None.
            cursor_type: Cursor type ('row', 'cell', or 'none').
            zebra_stripes: Whether to enable zebra striping.
        """
        table.cursor_type = cursor_type
        table.zebra_stripes = zebra_stripes
        for name, width in columns:
            table.add_column(name, width=width)

    def _get_row_index(
        self, event: DataTable.RowHighlighted | DataTable.RowSelected
    ) -> int | None:
        """Extract the integer row key from a row event.

        Rows are keyed by str(record.id).

        Returns:
            The record index, or None if the key is missing or not numeric.
        """
        row_key = event.row_key
        if row_key is None or row_key.value is None:
            return None
        try:
            return int(row_key.value)
        except (ValueError, TypeError):
            return None
