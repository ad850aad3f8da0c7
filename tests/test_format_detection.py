"""Tests for format detection in prompt_compare/data_formats/format_detector.py."""

from __future__ import annotations

import pytest

from prompt_compare.data_formats import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    CSVLoader,
    ParquetLoader,
    TSVLoader,
    detect_format,
    get_loader,
    get_loader_for_format,
    is_supported_file,
)


class TestDetectFormat:
    """Tests for detect_format() function."""

    def test_detect_csv_extension(self, tmp_path):
        """Detect .csv files correctly."""
        filepath = tmp_path / "prompts.csv"
        filepath.write_text("before,after\n")
        assert detect_format(str(filepath)) == "csv"

    @pytest.mark.parametrize("name", ["prompts.tsv", "prompts.tab"])
    def test_detect_tsv_extensions(self, name):
        """Detect tab-separated extensions (file need not exist)."""
        assert detect_format(name) == "tsv"

    @pytest.mark.parametrize("name", ["prompts.parquet", "prompts.pq"])
    def test_detect_parquet_extensions(self, name):
        assert detect_format(name) == "parquet"

    def test_detect_uppercase_extension(self):
        """Handle uppercase extensions."""
        assert detect_format("PROMPTS.CSV") == "csv"

    def test_sniff_parquet_magic(self, tmp_path):
        """Unknown extension with PAR1 magic bytes is Parquet."""
        filepath = tmp_path / "prompts.bin"
        filepath.write_bytes(b"PAR1" + b"\x00" * 8)
        assert detect_format(str(filepath)) == "parquet"

    def test_unknown_extension_raises(self, tmp_path):
        """Unknown extension without a recognizable signature is rejected."""
        filepath = tmp_path / "notes.txt"
        filepath.write_text("before,after\n")
        with pytest.raises(ValueError, match="Cannot determine format"):
            detect_format(str(filepath))

    def test_missing_file_without_extension_raises(self, tmp_path):
        with pytest.raises(ValueError):
            detect_format(str(tmp_path / "missing"))


class TestIsSupportedFile:
    """Tests for the extension check applied before reading."""

    @pytest.mark.parametrize(
        "name", ["a.csv", "a.CSV", "dir/a.tsv", "a.parquet", "a.pq", "a.tab"]
    )
    def test_supported(self, name):
        assert is_supported_file(name)

    @pytest.mark.parametrize("name", ["a.txt", "a.csv.bak", "csv", "a.json"])
    def test_unsupported(self, name):
        assert not is_supported_file(name)


class TestGetLoader:
    """Tests for loader factories."""

    def test_get_loader_by_extension(self):
        assert isinstance(get_loader("a.csv"), CSVLoader)
        assert isinstance(get_loader("a.tsv"), TSVLoader)
        assert isinstance(get_loader("a.parquet"), ParquetLoader)

    def test_get_loader_format_override(self):
        """An explicit format should win over the extension."""
        assert isinstance(get_loader("a.csv", "tsv"), TSVLoader)

    def test_get_loader_for_format(self):
        for name in SUPPORTED_FORMATS:
            assert get_loader_for_format(name).format_name == name

    def test_get_loader_for_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_loader_for_format("xlsx")

    def test_extension_map_targets_supported_formats(self):
        assert set(EXTENSION_MAP.values()) <= SUPPORTED_FORMATS
