"""
Parser for flashcard CSV documents.

Expected columns (positional, header optional):
    front,back,type,tags,book

Example:
    front,back,type,tags,book
    Hello,World,vocab,"greeting,basics",The Little Prince

Output records are UNTRUSTED: they still need to go through the row
validator before anything is committed.
"""

from dataclasses import dataclass

from flashdeck.models.import_result import RawRecord
from flashdeck.parsers.csv_dialect import (
    DEFAULT_QUOTE_CHAR,
    detect_delimiter,
    split_records,
    tokenize_line,
)

CSV_HEADERS = ("front", "back", "type", "tags", "book")

# Substrings that mark the first line as a header when the caller doesn't say
HEADER_MARKERS = ("front", "question")


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Records parsed from one document plus what the parser decided."""

    records: list[RawRecord]
    delimiter: str
    has_header: bool


def looks_like_header(line: str) -> bool:
    """
    Heuristic header check: does the line mention "front" or "question"?

    A data-only file whose first card contains either word is misread as
    a header, which is why callers may pass has_header explicitly.
    """
    lowered = line.lower()
    return any(marker in lowered for marker in HEADER_MARKERS)


def _to_record(fields: list[str]) -> RawRecord:
    """
    Map tokenized fields positionally; missing trailing fields are empty.

    Values arrive already unquoted from the tokenizer and are used as is.
    """
    padded = list(fields[: len(CSV_HEADERS)])
    padded.extend([""] * (len(CSV_HEADERS) - len(padded)))
    front, back, card_type, tags, book = padded
    return RawRecord(front=front, back=back, type=card_type, tags=tags, book=book)


def parse_document(
    content: str,
    delimiter: str | None = None,
    has_header: bool | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> ParsedDocument:
    """
    Parse a CSV document into positional records.

    Args:
        content: Full decoded document text
        delimiter: Field delimiter, or None to detect from the first line
        has_header: Whether line 1 is a header, or None to sniff it
        quote_char: Quote character of the dialect

    Returns:
        ParsedDocument with one RawRecord per non-blank data line.
    """
    used_delimiter = delimiter or detect_delimiter(content)
    lines = split_records(content, used_delimiter, quote_char)

    if not lines:
        return ParsedDocument(records=[], delimiter=used_delimiter, has_header=False)

    header = looks_like_header(lines[0]) if has_header is None else has_header
    data_lines = lines[1:] if header else lines

    records = [
        _to_record(tokenize_line(line, used_delimiter, quote_char))
        for line in data_lines
    ]

    return ParsedDocument(records=records, delimiter=used_delimiter, has_header=header)


def parse_csv_content(
    content: str,
    delimiter: str | None = None,
    has_header: bool | None = None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> list[RawRecord]:
    """
    Convenience function: parse a document straight to records.

    Args:
        content: Full decoded document text
        delimiter: Field delimiter, or None to detect
        has_header: Whether line 1 is a header, or None to sniff it
        quote_char: Quote character of the dialect

    Returns:
        List of RawRecord. Empty list if content is empty/whitespace.
    """
    return parse_document(
        content, delimiter=delimiter, has_header=has_header, quote_char=quote_char
    ).records
