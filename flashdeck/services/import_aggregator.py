"""
Import aggregation.

Applies the row cap, validates every remaining row and summarizes the
attempt. The summary is a pure function of (records, catalog): the same
input always yields the same ImportSummary.

INVARIANT: The row cap is applied BEFORE validation. Dropped rows are
not errors; they are reported via ImportSummary.dropped_rows.
"""

import logging
from collections.abc import Iterable, Sequence

from flashdeck.config import MAX_IMPORT_ROWS
from flashdeck.models.flashcard import BookRef
from flashdeck.models.import_result import ImportSummary, RawRecord, RowOutcome
from flashdeck.services.book_resolver import BookResolver
from flashdeck.services.row_validator import validate_row

logger = logging.getLogger(__name__)


def validate_import(
    records: Sequence[RawRecord],
    books: Iterable[BookRef] | None = None,
    max_rows: int = MAX_IMPORT_ROWS,
) -> ImportSummary:
    """
    Validate all import rows.

    Args:
        records: Parsed records, in document order
        books: Catalog for book matching, or None to skip matching
        max_rows: Row cap; records beyond it are discarded unvalidated

    Returns:
        ImportSummary over the (possibly truncated) records.
    """
    limited = records[:max_rows]
    dropped = len(records) - len(limited)

    if dropped:
        logger.info(
            "import_rows_truncated",
            extra={"max_rows": max_rows, "dropped_rows": dropped},
        )

    resolver = BookResolver(books)
    rows = tuple(
        validate_row(record, row_number, resolver)
        for row_number, record in enumerate(limited, start=1)
    )

    valid_count = sum(1 for row in rows if row.is_valid)
    warning_count = sum(1 for row in rows if row.is_valid and row.warnings)

    summary = ImportSummary(
        total_rows=len(rows),
        valid_count=valid_count,
        invalid_count=len(rows) - valid_count,
        warning_count=warning_count,
        rows=rows,
        dropped_rows=dropped,
    )

    logger.info(
        "import_validated",
        extra={
            "total_rows": summary.total_rows,
            "valid_count": summary.valid_count,
            "invalid_count": summary.invalid_count,
            "warning_count": summary.warning_count,
        },
    )

    return summary


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def get_import_summary_text(summary: ImportSummary) -> str:
    """
    One-line description of a summary, e.g. "3 valid cards, 1 invalid card".

    Zero counts are omitted; an empty summary gives an empty string.
    """
    parts: list[str] = []

    if summary.valid_count > 0:
        parts.append(_plural(summary.valid_count, "valid card"))
    if summary.invalid_count > 0:
        parts.append(_plural(summary.invalid_count, "invalid card"))
    if summary.warning_count > 0:
        parts.append(_plural(summary.warning_count, "card") + " with warnings")

    return ", ".join(parts)


def has_errors(row: RowOutcome) -> bool:
    """Check if a row has errors."""
    return len(row.errors) > 0


def has_warnings(row: RowOutcome) -> bool:
    """Check if a row has warnings."""
    return len(row.warnings) > 0
