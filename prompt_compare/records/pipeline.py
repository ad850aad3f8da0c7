"""
Ingestion pipeline: payload -> RawTable -> column roles -> PromptRecords.

Ingestion is all-or-nothing. Every function here either returns the full
record list or raises before anything is handed to a session.
"""

from __future__ import annotations

import aiofiles

from prompt_compare.data_formats import (
    RawTable,
    get_loader,
    get_loader_for_format,
    parse_table,
)
from prompt_compare.records.builder import PromptRecord, build_records
from prompt_compare.records.roles import resolve_column_roles


def records_from_table(table: RawTable) -> list[PromptRecord]:
    """Resolve column roles for a table and build its records."""
    roles = resolve_column_roles(table.headers)
    return build_records(table.rows, roles)


def ingest_text(text: str, delimiter: str | None = None) -> list[PromptRecord]:
    """Parse delimited text into prompt records.

    Args:
        text: Delimited text content.
        delimiter: Field delimiter, or None to auto-detect.

    Returns:
        Records in row order.

    Raises:
        ParseError: If the text is malformed.
        EmptyInputError: If there is no header or no data rows.

    Examples:
        >>> records = ingest_text("before,after\\nold,new\\n")
        >>> records[0].after
        'new'
    """
    return records_from_table(parse_table(text, delimiter))


def ingest_bytes(data: bytes, format_name: str = "csv") -> list[PromptRecord]:
    """Parse a raw payload of the given format into prompt records.

    Args:
        data: File content as bytes.
        format_name: "csv", "tsv" or "parquet".

    Returns:
        Records in row order.

    Raises:
        ValueError: If the format is unsupported.
        ParseError: If the payload is malformed.
        EmptyInputError: If there is no header or no data rows.
    """
    loader = get_loader_for_format(format_name)
    return records_from_table(loader.parse(data))


async def ingest_file(path: str, format_name: str = "auto") -> list[PromptRecord]:
    """Read a file without blocking the event loop and parse it.

    Args:
        path: Path to the file.
        format_name: Format hint; "auto" detects from the file.

    Returns:
        Records in row order.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the format cannot be determined or is unsupported.
        ParseError: If the payload is malformed.
        EmptyInputError: If there is no header or no data rows.
    """
    loader = get_loader(path, format_name)
    async with aiofiles.open(path, "rb") as f:
        data = await f.read()
    return records_from_table(loader.parse(data))


def load_prompt_records(path: str, format_name: str = "auto") -> list[PromptRecord]:
    """Synchronous counterpart of ingest_file()."""
    loader = get_loader(path, format_name)
    return records_from_table(loader.load(path))
