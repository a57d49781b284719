"""
Import Result Models.

This module defines the trust boundary between raw CSV records
and validated flashcards.

INVARIANTS:
- RawRecord is UNTRUSTED data straight from the tokenizer
- ValidatedCard is TRUSTED: front/back are trimmed and within bounds
- RowOutcome.card is present if and only if RowOutcome.is_valid
- All models are frozen (immutable after construction)
"""

from dataclasses import dataclass

from flashdeck.models.flashcard import CardType


@dataclass(frozen=True, slots=True)
class RawRecord:
    """
    One positional data line from a CSV document.

    Fields are exactly as read (unescaped), possibly empty.
    """

    front: str = ""
    back: str = ""
    type: str = ""
    tags: str = ""
    book: str = ""


@dataclass(frozen=True, slots=True)
class ValidatedCard:
    """
    A card ready to be committed.

    Attributes:
        front: Trimmed, non-empty question side
        back: Trimmed, non-empty answer side
        type: Canonical card type
        tags: Parsed tags, order preserved, capped
        book_id: Catalog id if the book column resolved, else None
        book_original: Trimmed book text as written, None when empty
    """

    front: str
    back: str
    type: CardType
    tags: tuple[str, ...] = ()
    book_id: str | None = None
    book_original: str | None = None


@dataclass(frozen=True, slots=True)
class RowOutcome:
    """Validation result for a single data row."""

    row_number: int
    """1-based position among data rows (header excluded)."""

    is_valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    card: ValidatedCard | None
    original: RawRecord

    def __post_init__(self) -> None:
        if (self.card is not None) != self.is_valid:
            raise ValueError("RowOutcome.card must be present if and only if the row is valid")


@dataclass(frozen=True, slots=True)
class ImportSummary:
    """Aggregate result of validating one import attempt."""

    total_rows: int
    """Rows considered, after the row cap was applied."""

    valid_count: int
    invalid_count: int

    warning_count: int
    """Valid rows carrying at least one warning."""

    rows: tuple[RowOutcome, ...]

    dropped_rows: int = 0
    """Rows discarded by the row cap before validation."""

    @property
    def can_import(self) -> bool:
        """Whether at least one row is usable."""
        return self.valid_count > 0

    @property
    def truncated(self) -> bool:
        """Whether the row cap discarded any input rows."""
        return self.dropped_rows > 0
