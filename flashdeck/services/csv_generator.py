"""
Flashcard CSV Generator.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

It accepts caller-supplied ExportRecords, never mutates them, and
produces text the flashcard CSV parser reads back. Column order:

    front,back,type,tags,book[,status][,easeFactor,interval,dueDate][,createdAt]
"""

from collections.abc import Iterable
from datetime import UTC, date, datetime

from flashdeck.models.export import DEFAULT_EXPORT_OPTIONS, ExportRecord, SerializationOptions
from flashdeck.parsers.csv_dialect import escape
from flashdeck.parsers.flashcard_csv import CSV_HEADERS

TEMPLATE_FILENAME = "flashcard_template.csv"

# Sample rows for the starter template, already in dialect form
TEMPLATE_ROWS = (
    '"What is photosynthesis?","The process by which plants convert sunlight into energy",'
    'VOCABULARY,"science,biology",""',
    '"Explain the water cycle","Water evaporates, forms clouds, falls as precipitation, '
    'and collects in bodies of water",CONCEPT,"science,earth",""',
    '"Who wrote 1984?","George Orwell",CUSTOM,"literature,quiz",""',
)


def generate_header(options: SerializationOptions = DEFAULT_EXPORT_OPTIONS) -> str:
    """Header line for the enabled columns."""
    headers = list(CSV_HEADERS)

    if options.include_status:
        headers.append("status")
    if options.include_stats:
        headers.extend(["easeFactor", "interval", "dueDate"])
    if options.include_created_at:
        headers.append("createdAt")

    return options.delimiter.join(headers)


def _format_number(value: float) -> str:
    """Render 2.0 as "2" and 2.5 as "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def generate_row(
    record: ExportRecord,
    options: SerializationOptions = DEFAULT_EXPORT_OPTIONS,
) -> str:
    """
    Render one record as a data line.

    Text columns are escaped; optional columns (status, numbers, ISO
    dates) are written as-is.
    """
    delimiter, quote_char = options.delimiter, options.quote_char

    fields = [
        escape(record.front, delimiter, quote_char),
        escape(record.back, delimiter, quote_char),
        record.type.value,
        escape(",".join(record.tags), delimiter, quote_char),
        escape(record.book_title or "", delimiter, quote_char),
    ]

    if options.include_status:
        fields.append(record.status.value)
    if options.include_stats:
        fields.extend(
            [
                _format_number(record.ease_factor),
                _format_number(record.interval),
                record.due_date,
            ]
        )
    if options.include_created_at:
        fields.append(record.created_at)

    return delimiter.join(fields)


def generate_document(
    records: Iterable[ExportRecord],
    options: SerializationOptions = DEFAULT_EXPORT_OPTIONS,
) -> str:
    """
    Render a full CSV document.

    An empty record list yields just the header line. There is no
    trailing newline.
    """
    lines = [generate_header(options)]
    lines.extend(generate_row(record, options) for record in records)
    return "\n".join(lines)


def generate_template() -> str:
    """Starter CSV with the canonical header and a few sample cards."""
    return "\n".join([",".join(CSV_HEADERS), *TEMPLATE_ROWS])


def generate_export_filename(
    prefix: str = "flashcards",
    extension: str = "csv",
    today: date | None = None,
) -> str:
    """
    Suggested download filename: <prefix>_<YYYY-MM-DD>.<extension>.

    Uses the current UTC date unless today is given.
    """
    day = today or datetime.now(UTC).date()
    return f"{prefix}_{day.isoformat()}.{extension}"
