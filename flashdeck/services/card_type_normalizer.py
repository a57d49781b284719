"""
Card type normalization.

Maps free-text "type" column values onto the closed CardType set.
Total over all strings: never raises, always returns a canonical type.
"""

from flashdeck.models.flashcard import CardType

VALID_TYPES: frozenset[str] = frozenset(t.value for t in CardType)

# Case-insensitive aliases accepted in the type column
TYPE_ALIASES: dict[str, CardType] = {
    "vocabulary": CardType.VOCABULARY,
    "vocab": CardType.VOCABULARY,
    "word": CardType.VOCABULARY,
    "concept": CardType.CONCEPT,
    "idea": CardType.CONCEPT,
    "comprehension": CardType.COMPREHENSION,
    "understanding": CardType.COMPREHENSION,
    "quote": CardType.QUOTE,
    "passage": CardType.QUOTE,
    "custom": CardType.CUSTOM,
    "other": CardType.CUSTOM,
    "": CardType.CUSTOM,
}


def _lookup(value: str) -> CardType | None:
    """Resolve an alias or canonical name, None if neither."""
    alias = TYPE_ALIASES.get(value.lower())
    if alias is not None:
        return alias

    upper = value.upper()
    if upper in VALID_TYPES:
        return CardType(upper)

    return None


def normalize_card_type(value: str) -> CardType:
    """
    Normalize a free-text type to a canonical CardType.

    Empty input and anything unrecognized become CUSTOM.
    """
    if not value:
        return CardType.CUSTOM

    return _lookup(value.strip()) or CardType.CUSTOM


def type_warning(value: str) -> str | None:
    """
    Warning for a type value that had to be defaulted, else None.

    Aliases and canonical names (any case) are silent.
    """
    stripped = value.strip() if value else ""
    if not stripped or _lookup(stripped) is not None:
        return None
    return f'Unknown type "{value}", using CUSTOM'
