from flashdeck.parsers.csv_dialect import (
    detect_delimiter,
    escape,
    split_records,
    tokenize_line,
    trim_field,
    unescape,
)
from flashdeck.parsers.flashcard_csv import (
    CSV_HEADERS,
    ParsedDocument,
    looks_like_header,
    parse_csv_content,
    parse_document,
)

__all__ = [
    "CSV_HEADERS",
    "ParsedDocument",
    "detect_delimiter",
    "escape",
    "looks_like_header",
    "parse_csv_content",
    "parse_document",
    "split_records",
    "tokenize_line",
    "trim_field",
    "unescape",
]
