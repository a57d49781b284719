"""Tag list parsing for the tags column."""

from flashdeck.config import IMPORT_MAX_TAG_LENGTH, IMPORT_MAX_TAGS_PER_CARD

NO_VALID_TAGS_WARNING = "No valid tags found"


def parse_tags(
    value: str,
    max_tags: int = IMPORT_MAX_TAGS_PER_CARD,
    max_length: int = IMPORT_MAX_TAG_LENGTH,
) -> tuple[str, ...]:
    """
    Parse a comma-separated tag list.

    Pieces are trimmed; empty and over-long pieces are dropped silently,
    then the list is cut to max_tags. Order is preserved and duplicates
    are kept.
    """
    if not value:
        return ()

    tags = [tag.strip() for tag in value.split(",")]
    kept = [tag for tag in tags if 0 < len(tag) <= max_length]
    return tuple(kept[:max_tags])


def tags_warning(value: str, tags: tuple[str, ...]) -> str | None:
    """Warning when the column had text but no tag survived."""
    if value and not tags:
        return NO_VALID_TAGS_WARNING
    return None
