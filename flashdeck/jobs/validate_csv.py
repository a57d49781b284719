"""
Validate a flashcard CSV file from the command line.

Runs the same pipeline as the import preview and logs the summary and
per-row diagnostics. Exits non-zero when no row can be imported.

    python -m flashdeck.jobs.validate_csv cards.csv --books books.json
"""

import argparse
import asyncio
import json
import logging
import mimetypes
import sys
from pathlib import Path

from flashdeck.config import settings
from flashdeck.models.failure import FileReadError, KnownError
from flashdeck.models.flashcard import BookRef
from flashdeck.models.import_result import ImportSummary
from flashdeck.parsers.csv_dialect import DEFAULT_QUOTE_CHAR
from flashdeck.services.import_aggregator import get_import_summary_text
from flashdeck.services.import_workflow import import_upload

logger = logging.getLogger(__name__)

DELIMITER_CHOICES = {"comma": ",", "semicolon": ";", "tab": "\t"}
QUOTE_CHOICES = {"double": '"', "single": "'"}


class LocalUpload:
    """A file on disk presented as an upload."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.filename: str | None = path.name
        self.content_type: str | None = mimetypes.guess_type(path.name)[0] or ""
        self.size: int | None = path.stat().st_size

    async def read(self, size: int = -1) -> bytes:
        data = await asyncio.to_thread(self.path.read_bytes)
        return data if size < 0 else data[:size]


def load_books(path: Path) -> list[BookRef]:
    """Load a catalog from a JSON array of {"id", "title"} objects."""
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)
    return [BookRef(id=str(entry["id"]), title=str(entry["title"])) for entry in entries]


def report(summary: ImportSummary) -> None:
    """Log the summary line and every row that has diagnostics."""
    logger.info("Summary: %s", get_import_summary_text(summary) or "no rows")
    if summary.truncated:
        logger.warning(
            "Only the first %d rows were checked; %d rows were dropped",
            summary.total_rows,
            summary.dropped_rows,
        )

    for row in summary.rows:
        for error in row.errors:
            logger.error("Row %d: %s", row.row_number, error)
        for warning in row.warnings:
            logger.warning("Row %d: %s", row.row_number, warning)


async def run_validation(
    path: Path,
    books: list[BookRef] | None,
    delimiter: str | None,
    has_header: bool | None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> ImportSummary | None:
    """Validate one file; None if the file was rejected before parsing."""
    try:
        try:
            upload = LocalUpload(path)
        except OSError as e:
            raise FileReadError(str(e)) from e

        summary = await import_upload(
            upload,
            books,
            delimiter=delimiter,
            has_header=has_header,
            quote_char=quote_char,
            max_rows=settings.max_import_rows,
            max_file_size=settings.max_file_size,
        )
    except KnownError as e:
        logger.error("%s (%s)", e.message, e.detail)
        return None

    if summary is not None:
        report(summary)
    return summary


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Validate a flashcard CSV file")
    parser.add_argument("path", type=Path, help="CSV or TXT file to validate")
    parser.add_argument("--books", type=Path, help="JSON catalog of {id, title} entries")
    parser.add_argument(
        "--delimiter",
        choices=sorted(DELIMITER_CHOICES),
        help="Field delimiter (auto-detected by default)",
    )
    parser.add_argument(
        "--quote",
        choices=sorted(QUOTE_CHOICES),
        default="double",
        help="Quote character the file was written with",
    )
    header = parser.add_mutually_exclusive_group()
    header.add_argument("--header", dest="has_header", action="store_true", default=None)
    header.add_argument("--no-header", dest="has_header", action="store_false")
    parser.set_defaults(has_header=None)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    books = load_books(args.books) if args.books else None
    delimiter = DELIMITER_CHOICES[args.delimiter] if args.delimiter else None

    summary = asyncio.run(
        run_validation(
            args.path, books, delimiter, args.has_header, QUOTE_CHOICES[args.quote]
        )
    )
    return 0 if summary is not None and summary.can_import else 1


if __name__ == "__main__":
    sys.exit(main())
