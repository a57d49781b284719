"""
Row validation.

Turns one untrusted RawRecord into a RowOutcome. Only front/back
problems are errors; type, tag and book findings are warnings and never
invalidate a row.

Diagnostics are built as immutable tuples in check order:
front, back, type, tags, book.
"""

from flashdeck.config import (
    IMPORT_MAX_BACK_LENGTH,
    IMPORT_MAX_FRONT_LENGTH,
    IMPORT_MIN_BACK_LENGTH,
    IMPORT_MIN_FRONT_LENGTH,
)
from flashdeck.models.import_result import RawRecord, RowOutcome, ValidatedCard
from flashdeck.services.book_resolver import BookResolver
from flashdeck.services.card_type_normalizer import normalize_card_type, type_warning
from flashdeck.services.tag_parser import parse_tags, tags_warning


def _length_errors(label: str, value: str, min_length: int, max_length: int) -> tuple[str, ...]:
    """Errors for a required text field that must fit within bounds."""
    if not value:
        return (f"{label} content is required",)
    if len(value) < min_length:
        suffix = "" if min_length == 1 else "s"
        return (f"{label} must be at least {min_length} character{suffix}",)
    if len(value) > max_length:
        return (f"{label} cannot exceed {max_length} characters",)
    return ()


def validate_row(
    record: RawRecord,
    row_number: int,
    resolver: BookResolver | None = None,
) -> RowOutcome:
    """
    Validate a single import row.

    Args:
        record: Positional record from the parser
        row_number: 1-based data row number
        resolver: Book resolver for the attempt's catalog; None skips matching

    Returns:
        RowOutcome. card is set iff there are no errors.
    """
    front = record.front.strip()
    back = record.back.strip()

    errors = _length_errors(
        "Front", front, IMPORT_MIN_FRONT_LENGTH, IMPORT_MAX_FRONT_LENGTH
    ) + _length_errors("Back", back, IMPORT_MIN_BACK_LENGTH, IMPORT_MAX_BACK_LENGTH)

    card_type = normalize_card_type(record.type)
    tags = parse_tags(record.tags)
    book = (resolver or BookResolver(None)).resolve(record.book)

    warnings = tuple(
        warning
        for warning in (
            type_warning(record.type),
            tags_warning(record.tags, tags),
            book.warning,
        )
        if warning is not None
    )

    is_valid = not errors
    card = (
        ValidatedCard(
            front=front,
            back=back,
            type=card_type,
            tags=tags,
            book_id=book.book_id,
            book_original=book.book_original,
        )
        if is_valid
        else None
    )

    return RowOutcome(
        row_number=row_number,
        is_valid=is_valid,
        errors=errors,
        warnings=warnings,
        card=card,
        original=record,
    )
