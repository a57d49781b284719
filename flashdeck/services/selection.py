"""
Row selection for committing an import.

The Selection is owned and mutated by the caller (one per preview).
The engine only answers pure queries over (summary, selection), and
those queries always intersect with the summary's valid rows: selecting
an invalid row number never commits anything.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from flashdeck.models.import_result import ImportSummary, ValidatedCard


def _valid_row_numbers(summary: ImportSummary) -> set[int]:
    return {row.row_number for row in summary.rows if row.is_valid}


@dataclass
class Selection:
    """Row numbers the caller intends to commit."""

    row_numbers: set[int] = field(default_factory=set)

    @classmethod
    def initial(cls, summary: ImportSummary) -> "Selection":
        """Start with every valid row selected."""
        return cls(_valid_row_numbers(summary))

    def toggle(self, row_number: int) -> None:
        """Select the row if unselected, else deselect it."""
        if row_number in self.row_numbers:
            self.row_numbers.discard(row_number)
        else:
            self.row_numbers.add(row_number)

    def select_all_valid(self, summary: ImportSummary) -> None:
        """Replace the selection with every valid row of the summary."""
        self.row_numbers = _valid_row_numbers(summary)

    def deselect_all(self) -> None:
        """Clear the selection."""
        self.row_numbers = set()

    def is_all_valid_selected(self, summary: ImportSummary) -> bool:
        """True if every valid row is selected."""
        return _valid_row_numbers(summary) <= self.row_numbers

    def __contains__(self, row_number: object) -> bool:
        return row_number in self.row_numbers

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.row_numbers))

    def __len__(self) -> int:
        return len(self.row_numbers)


def get_valid_cards(summary: ImportSummary) -> list[ValidatedCard]:
    """Cards from every valid row, in row order."""
    return [row.card for row in summary.rows if row.is_valid and row.card is not None]


def get_selected_cards(
    summary: ImportSummary,
    selection: Selection | Iterable[int],
) -> list[ValidatedCard]:
    """
    Cards to commit: rows that are both valid and selected.

    Args:
        summary: The summary the selection was made against
        selection: A Selection or any iterable of row numbers

    Returns:
        Cards in ascending row-number order.
    """
    selected = selection.row_numbers if isinstance(selection, Selection) else set(selection)
    rows = sorted(summary.rows, key=lambda row: row.row_number)
    return [
        row.card
        for row in rows
        if row.is_valid and row.card is not None and row.row_number in selected
    ]
