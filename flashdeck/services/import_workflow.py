"""
Import attempt orchestration.

Chains the pipeline for one attempt:

    file guard -> read -> detect delimiter -> parse -> validate

Only the read awaits. If a caller starts a second attempt before the
first read resolves, the ImportAttemptTracker lets the older attempt
notice it was superseded so it cannot overwrite the newer result.
"""

import logging
from collections.abc import Iterable
from threading import Lock

from flashdeck.config import MAX_FILE_SIZE, MAX_IMPORT_ROWS
from flashdeck.models.flashcard import BookRef
from flashdeck.models.import_result import ImportSummary
from flashdeck.parsers.csv_dialect import DEFAULT_QUOTE_CHAR
from flashdeck.parsers.flashcard_csv import parse_document
from flashdeck.services.file_guard import Upload, check_upload, read_upload_text
from flashdeck.services.import_aggregator import validate_import

logger = logging.getLogger(__name__)


class ImportAttemptTracker:
    """
    Hands out monotonically increasing attempt ids.

    Only the most recently started attempt is current.
    """

    def __init__(self) -> None:
        self._latest = 0
        self._lock = Lock()

    def begin(self) -> int:
        """Start a new attempt, superseding any earlier one."""
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, attempt_id: int) -> bool:
        """Whether no newer attempt has started since attempt_id."""
        with self._lock:
            return attempt_id == self._latest

    @property
    def latest(self) -> int:
        """Id of the most recent attempt (0 before any)."""
        return self._latest


def import_text(
    content: str,
    books: Iterable[BookRef] | None = None,
    delimiter: str | None = None,
    has_header: bool | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
    max_rows: int = MAX_IMPORT_ROWS,
) -> ImportSummary:
    """
    Parse and validate already-decoded CSV text.

    Args:
        content: Full document text
        books: Catalog for book matching, or None to skip matching
        delimiter: Field delimiter, or None to detect
        has_header: Whether line 1 is a header, or None to sniff it
        quote_char: Quote character of the dialect
        max_rows: Row cap

    Returns:
        ImportSummary for the document.
    """
    document = parse_document(
        content, delimiter=delimiter, has_header=has_header, quote_char=quote_char
    )
    return validate_import(document.records, books, max_rows=max_rows)


async def import_upload(
    upload: Upload,
    books: Iterable[BookRef] | None = None,
    delimiter: str | None = None,
    has_header: bool | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
    tracker: ImportAttemptTracker | None = None,
    max_rows: int = MAX_IMPORT_ROWS,
    max_file_size: int = MAX_FILE_SIZE,
) -> ImportSummary | None:
    """
    Run a full import attempt for an uploaded file.

    Args:
        upload: The uploaded file
        books: Catalog for book matching
        delimiter: Field delimiter, or None to detect
        has_header: Whether line 1 is a header, or None to sniff it
        quote_char: Quote character of the dialect
        tracker: Attempt tracker shared by the caller's attempts, if any
        max_rows: Row cap
        max_file_size: Byte cap

    Returns:
        ImportSummary, or None if a newer attempt started while this
        one was reading.

    Raises:
        FileTypeError, FileTooLargeError: Pre-flight failures
        FileReadError: The read failed
    """
    attempt_id = tracker.begin() if tracker is not None else None

    check_upload(upload.filename, upload.content_type, upload.size, max_file_size)
    content = await read_upload_text(upload, max_file_size)

    if tracker is not None and attempt_id is not None and not tracker.is_current(attempt_id):
        logger.info(
            "import_attempt_superseded",
            extra={"attempt_id": attempt_id, "latest": tracker.latest},
        )
        return None

    return import_text(
        content,
        books,
        delimiter=delimiter,
        has_header=has_header,
        quote_char=quote_char,
        max_rows=max_rows,
    )
