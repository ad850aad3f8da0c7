"""
Data formats module for table loading.

This module turns file payloads (CSV, TSV, Parquet) into a RawTable:
an ordered header list plus one header -> cell text mapping per row.

Usage:
    from prompt_compare.data_formats import get_loader, parse_table

    # Auto-detect format and get appropriate loader
    loader = get_loader("prompts.csv")
    table = loader.load("prompts.csv")
    print(table.headers)

    # Or parse text directly
    table = parse_table("before,after\\nold,new\\n")
"""

from prompt_compare.data_formats.base import RawTable, TableLoader
from prompt_compare.data_formats.delimited_loader import (
    CSVLoader,
    DelimitedTextLoader,
    TSVLoader,
    decode_payload,
    guess_delimiter,
    parse_table,
)
from prompt_compare.data_formats.errors import EmptyInputError, IngestError, ParseError
from prompt_compare.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    get_loader,
    get_loader_for_format,
    is_supported_file,
)
from prompt_compare.data_formats.parquet_loader import ParquetLoader

__all__ = [
    # Table model and base class
    "RawTable",
    "TableLoader",
    # Errors
    "IngestError",
    "ParseError",
    "EmptyInputError",
    # Format detection
    "detect_format",
    "get_loader",
    "get_loader_for_format",
    "is_supported_file",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Delimited text
    "decode_payload",
    "guess_delimiter",
    "parse_table",
    # Loaders
    "DelimitedTextLoader",
    "CSVLoader",
    "TSVLoader",
    "ParquetLoader",
]
