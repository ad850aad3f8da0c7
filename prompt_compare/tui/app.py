"""
Main Textual application for Prompt Compare.

Loads a table of before/after prompt pairs and shows them one pair at a
time side by side.

Supported Formats:
    - CSV (.csv): Comma-separated (delimiter auto-detected)
    - TSV (.tsv, .tab): Tab-separated
    - Parquet (.parquet, .pq): Apache Parquet columnar format
"""

from __future__ import annotations

import argparse
import os
import sys

from textual import work
from textual.app import App
from textual.binding import Binding

from prompt_compare.data_formats import (
    SUPPORTED_FORMATS,
    EmptyInputError,
    ParseError,
)
from prompt_compare.records import PromptRecord, ingest_file
from prompt_compare.session import ComparisonSession, ViewMode
from prompt_compare.tui.views import CompareScreen


class PromptCompareApp(App):
    """A Textual app for browsing before/after prompt pairs."""

    TITLE = "Prompt Compare"

    CSS = """
    Screen {
        background: $surface;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        path: str | None = None,
        input_format: str = "auto",
        view_mode: ViewMode = ViewMode.RENDERED,
    ):
        """Initialize the app.

        Args:
            path: Optional file to load at start-up.
            input_format: Format hint ('auto', 'csv', 'tsv', 'parquet').
            view_mode: Initial view mode.
        """
        super().__init__()
        self._path = path
        self._input_format = input_format
        self.session = ComparisonSession(view_mode=view_mode)
        self._compare_screen: CompareScreen | None = None

    def on_mount(self) -> None:
        """Show the compare screen.

        The screen requests the start-up file itself once it is mounted.
        """
        self._compare_screen = CompareScreen(self.session, initial_path=self._path)
        self.push_screen(self._compare_screen)

    def on_compare_screen_file_requested(
        self, message: CompareScreen.FileRequested
    ) -> None:
        """Handle a load request from the compare screen."""
        self.open_file(message.path)

    def open_file(self, path: str) -> None:
        """Start ingesting a file in the background.

        A newer request cancels one still in flight, so the most recent
        request is the one that reaches the session.
        """
        self.log(f"Ingesting {path} (format={self._input_format})")
        self._ingest(path)

    @work(exclusive=True, group="ingest")
    async def _ingest(self, path: str) -> None:
        """Read and parse a file, then replace the session contents.

        The session is only touched after the whole file parsed, so a
        failure leaves the previous records, selection and view mode as
        they were.
        """
        try:
            records = await ingest_file(path, self._input_format)
        except EmptyInputError as e:
            self.log(f"Nothing to load from {path}: {e}")
            return
        except ParseError as e:
            self.notify(f"Failed to parse {os.path.basename(path)}: {e}", severity="error")
            return
        except ValueError as e:
            self.notify(f"Unsupported file format: {e}", severity="error")
            return
        except OSError as e:
            self.notify(f"Error reading file: {e}", severity="error")
            return

        self._on_records_loaded(path, records)

    def _on_records_loaded(self, path: str, records: list[PromptRecord]) -> None:
        self.session.load(records)
        self.title = f"Prompt Compare - {os.path.basename(path)}"
        if self._compare_screen is not None:
            self._compare_screen.refresh_session()
        self.log(f"Loaded {len(records)} records from {path}")
        self.notify(f"Loaded {len(records):,} prompts")


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Browse before/after prompt pairs side by side in a terminal UI. "
        "Supports CSV, TSV, and Parquet formats."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to a file of prompt pairs (optional; can be opened from the UI)",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="input_format",
        default="auto",
        choices=["auto", *sorted(SUPPORTED_FORMATS)],
        help="Input format (default: detect from file extension)",
    )
    parser.add_argument(
        "--view",
        default=ViewMode.RENDERED.value,
        choices=[mode.value for mode in ViewMode],
        help="Initial view mode (default: rendered)",
    )
    args = parser.parse_args()

    if args.path:
        if not os.path.exists(args.path):
            print(f"Error: Path not found: {args.path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(args.path, os.R_OK):
            print(f"Error: Permission denied: {args.path}", file=sys.stderr)
            sys.exit(1)

    app = PromptCompareApp(
        path=args.path,
        input_format=args.input_format,
        view_mode=ViewMode(args.view),
    )
    app.run()


if __name__ == "__main__":
    main()
