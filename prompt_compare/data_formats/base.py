"""
Table model and abstract base class for table loaders.

This module defines the RawTable produced by every loader and the
TableLoader interface that all format-specific loaders must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class RawTable:
    """Parsed tabular payload.

    Attributes:
        headers: Column names as authored, left to right.
        rows: One mapping per data row, header -> cell text. Every header
            is present in every row (missing cells are empty strings).
    """

    headers: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_cells(
        cls, headers: list[str], cell_rows: list[list[str]]
    ) -> "RawTable":
        """Build a table by matching each row positionally against headers.

        Short rows are padded with empty strings and excess cells are
        dropped. With duplicate headers the right-most column wins.

        Args:
            headers: Header row cells.
            cell_rows: Data rows as lists of cell text.

        Returns:
            An immutable RawTable.
        """
        width = len(headers)
        rows = []
        for cells in cell_rows:
            padded = list(cells[:width]) + [""] * (width - len(cells))
            rows.append(MappingProxyType(dict(zip(headers, padded))))
        return cls(headers=tuple(headers), rows=tuple(rows))

    @property
    def row_count(self) -> int:
        """Number of data rows."""
        return len(self.rows)


class TableLoader(ABC):
    """Abstract base class for loading tables.

    All format-specific loaders (CSV, TSV, Parquet) must inherit from
    this class and implement all abstract methods.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'csv', 'tsv', 'parquet')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.csv'])."""
        pass

    @abstractmethod
    def parse(self, data: bytes) -> RawTable:
        """Parse a raw payload into a table.

        Args:
            data: File content as bytes.

        Returns:
            The parsed RawTable.

        Raises:
            ParseError: If the payload is malformed.
            EmptyInputError: If there are no columns or no data rows.
        """
        pass

    def load(self, filename: str) -> RawTable:
        """Read a file and parse it.

        Args:
            filename: Path to the file.

        Returns:
            The parsed RawTable.

        Raises:
            FileNotFoundError: If the file does not exist.
            ParseError: If the payload is malformed.
            EmptyInputError: If there are no columns or no data rows.
        """
        with open(filename, "rb") as f:
            return self.parse(f.read())
