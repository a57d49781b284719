"""
Flashcard vocabulary shared by import and export.

CardType is the closed set every free-text "type" column is normalized onto.
CardStatus is only ever serialized; imports never read it back.
"""

from dataclasses import dataclass
from enum import Enum


class CardType(str, Enum):
    """Canonical flashcard types."""

    VOCABULARY = "VOCABULARY"
    CONCEPT = "CONCEPT"
    COMPREHENSION = "COMPREHENSION"
    QUOTE = "QUOTE"
    CUSTOM = "CUSTOM"


class CardStatus(str, Enum):
    """Scheduling status of a flashcard."""

    NEW = "NEW"
    LEARNING = "LEARNING"
    REVIEW = "REVIEW"
    SUSPENDED = "SUSPENDED"


@dataclass(frozen=True, slots=True)
class BookRef:
    """
    A catalog entry a free-text book column can resolve to.

    Attributes:
        id: Stable book identifier
        title: Display title, matched case-insensitively
    """

    id: str
    title: str
