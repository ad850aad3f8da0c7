"""
Format detection utilities for table files.

This module provides functions to detect file formats and get appropriate loaders.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prompt_compare.data_formats.base import TableLoader


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".tab": "tsv",
    ".parquet": "parquet",
    ".pq": "parquet",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["csv", "tsv", "parquet"])

PARQUET_MAGIC = b"PAR1"


def is_supported_file(filename: str) -> bool:
    """Check whether a file name carries a supported extension.

    This is the cheap check applied before any bytes are read, e.g. for
    a path pasted into the terminal.

    Examples:
        >>> is_supported_file("prompts.CSV")
        True
        >>> is_supported_file("notes.txt")
        False
    """
    return Path(filename).suffix.lower() in EXTENSION_MAP


def detect_format(filename: str) -> str:
    """Detect file format from extension or content.

    Args:
        filename: Path to the file.

    Returns:
        Format name: "csv", "tsv", or "parquet"

    Raises:
        ValueError: If the format cannot be determined or is unsupported.

    Examples:
        >>> detect_format("prompts.csv")
        'csv'
        >>> detect_format("prompts.pq")
        'parquet'
    """
    extension = Path(filename).suffix.lower()

    if extension in EXTENSION_MAP:
        return EXTENSION_MAP[extension]

    # Unknown extension: only Parquet has a reliable signature
    path = Path(filename)
    if path.is_file():
        try:
            with open(filename, "rb") as f:
                if f.read(4) == PARQUET_MAGIC:
                    return "parquet"
        except OSError:
            pass

    raise ValueError(
        f"Cannot determine format for '{filename}'. "
        f"Supported extensions: {', '.join(sorted(EXTENSION_MAP.keys()))}"
    )


def get_loader_for_format(format_name: str) -> "TableLoader":
    """Get a loader for a specific format name.

    Args:
        format_name: The format name ("csv", "tsv", or "parquet").

    Returns:
        A TableLoader instance for the specified format.

    Raises:
        ValueError: If the format name is not supported.
    """
    # Import loaders here to avoid circular imports
    from prompt_compare.data_formats.delimited_loader import CSVLoader, TSVLoader
    from prompt_compare.data_formats.parquet_loader import ParquetLoader

    if format_name not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format '{format_name}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    loaders: dict[str, TableLoader] = {
        "csv": CSVLoader(),
        "tsv": TSVLoader(),
        "parquet": ParquetLoader(),
    }

    return loaders[format_name]


def get_loader(filename: str, format_name: str = "auto") -> "TableLoader":
    """Factory function to get appropriate loader for a file.

    Args:
        filename: Path to the file.
        format_name: Format hint; "auto" detects from the file.

    Returns:
        A TableLoader instance appropriate for the file format.

    Raises:
        ValueError: If the format cannot be determined or is unsupported.

    Examples:
        >>> loader = get_loader("prompts.tsv")
        >>> loader.format_name
        'tsv'
    """
    if format_name == "auto":
        format_name = detect_format(filename)
    return get_loader_for_format(format_name)
