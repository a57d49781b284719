from dataclasses import dataclass, field
from typing import Literal

from flashdeck.models.flashcard import CardStatus, CardType

Delimiter = Literal[",", ";", "\t"]
QuoteChar = Literal['"', "'"]


@dataclass(frozen=True, slots=True)
class ExportRecord:
    """
    A fully-typed card to serialize.

    Attributes:
        front: Question side
        back: Answer side
        type: Canonical card type
        status: Scheduling status
        tags: Tag list, joined with commas on output
        book_title: Title of the linked book, if any
        ease_factor: SM-2 ease factor (e.g. 2.5)
        interval: Current interval in days
        due_date: ISO-8601 due date
        created_at: ISO-8601 creation timestamp
    """

    front: str
    back: str
    type: CardType = CardType.CUSTOM
    status: CardStatus = CardStatus.NEW
    tags: tuple[str, ...] = field(default_factory=tuple)
    book_title: str | None = None
    ease_factor: float = 2.5
    interval: int = 0
    due_date: str = ""
    created_at: str = ""


@dataclass(frozen=True, slots=True)
class SerializationOptions:
    """Which optional columns to write and which CSV dialect to use."""

    include_stats: bool = False
    """Adds easeFactor, interval, dueDate."""

    include_status: bool = False
    include_created_at: bool = False
    delimiter: Delimiter = ","
    quote_char: QuoteChar = '"'


DEFAULT_EXPORT_OPTIONS = SerializationOptions()
