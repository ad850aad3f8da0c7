"""
Parquet format table loader.

This module provides the ParquetLoader class for reading Apache Parquet
files into a RawTable. Every cell is converted to text so the table has
the same shape as one parsed from delimited text.
"""

from __future__ import annotations

from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from prompt_compare.data_formats.base import RawTable, TableLoader
from prompt_compare.data_formats.errors import EmptyInputError, ParseError


def _cell_to_text(value: Any) -> str:
    """Convert a Parquet cell value to display text.

    Args:
        value: A Python value produced by pyarrow (nested types included).

    Returns:
        Empty string for nulls, the value itself for strings, str() otherwise.
    """
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    return str(value)


class ParquetLoader(TableLoader):
    """Table loader for Apache Parquet format.

    Attributes:
        format_name: Returns 'parquet'.
        supported_extensions: Returns ['.parquet', '.pq'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "parquet"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".parquet", ".pq"]

    def parse(self, data: bytes) -> RawTable:
        """Parse a Parquet payload into a RawTable.

        Headers are the schema column names in schema order.

        Args:
            data: Parquet file content as bytes.

        Returns:
            The parsed RawTable.

        Raises:
            ParseError: If the payload is not a valid Parquet file.
            EmptyInputError: If the table has no columns or no rows.

        Examples:
            >>> loader = ParquetLoader()
            >>> table = loader.load("prompts.parquet")
            >>> table.headers
            ('before', 'after')
        """
        try:
            table = pq.read_table(pa.BufferReader(data))
        except (pa.ArrowInvalid, OSError) as e:
            raise ParseError(f"Invalid Parquet payload: {e}") from e

        headers = list(table.column_names)
        if not headers:
            raise EmptyInputError("Parquet file has no columns")
        if table.num_rows == 0:
            raise EmptyInputError("Parquet file has no rows")

        columns = table.to_pydict()
        cell_rows = [
            [_cell_to_text(columns[name][i]) for name in headers]
            for i in range(table.num_rows)
        ]
        return RawTable.from_cells(headers, cell_rows)
