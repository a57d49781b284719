"""
Book Resolution Service.

Resolves the free-text book column to a catalog entry. The catalog is
supplied by the caller; this service never fetches it.

INVARIANTS:
1. Empty book text resolves to "no book" with no diagnostic
2. Matching is case-insensitive on title, then exact on id
3. An unmatched book is a WARNING, never an error
4. The original text is always preserved for display
"""

from collections.abc import Iterable
from dataclasses import dataclass

from flashdeck.models.flashcard import BookRef


@dataclass(frozen=True, slots=True)
class BookResolution:
    """Result of resolving one book value."""

    book_id: str | None
    """Catalog id when matched."""

    book_original: str | None
    """Trimmed input text, None when empty."""

    warning: str | None = None

    @property
    def resolved(self) -> bool:
        """True if the text matched a catalog entry."""
        return self.book_id is not None


class BookResolver:
    """
    Resolves book text against a fixed catalog.

    Build once per import attempt and reuse across rows; lookups are
    dictionary hits rather than scans.
    """

    def __init__(self, books: Iterable[BookRef] | None) -> None:
        """
        Initialize resolver with a book catalog.

        Args:
            books: Catalog entries, or None when no catalog is available.
                With None, resolution is skipped and no warnings are raised.
        """
        self._has_catalog = books is not None
        self._by_title: dict[str, str] = {}
        self._ids: set[str] = set()

        for book in books or ():
            # First entry wins for duplicate titles
            self._by_title.setdefault(book.title.lower(), book.id)
            self._ids.add(book.id)

    def resolve(self, value: str) -> BookResolution:
        """
        Resolve a book column value.

        Args:
            value: Raw book text from the CSV

        Returns:
            BookResolution with id, original text and optional warning
        """
        original = value.strip() if value else ""
        if not original:
            return BookResolution(book_id=None, book_original=None)

        if not self._has_catalog:
            return BookResolution(book_id=None, book_original=original)

        book_id = self._by_title.get(original.lower())
        if book_id is None and original in self._ids:
            book_id = original

        if book_id is None:
            return BookResolution(
                book_id=None,
                book_original=original,
                warning=f'Book "{original}" not found',
            )

        return BookResolution(book_id=book_id, book_original=original)
