from flashdeck.models.import_result import RawRecord
from flashdeck.services.import_aggregator import validate_import
from flashdeck.services.selection import Selection, get_selected_cards, get_valid_cards


def _summary():
    """Rows 1, 3 and 4 valid; row 2 invalid."""
    return validate_import(
        [
            RawRecord(front="one", back="1"),
            RawRecord(front="", back="2"),
            RawRecord(front="three", back="3"),
            RawRecord(front="four", back="4"),
        ]
    )


class TestSelection:
    def test_initial_selects_every_valid_row(self) -> None:
        selection = Selection.initial(_summary())

        assert list(selection) == [1, 3, 4]
        assert 2 not in selection

    def test_toggle(self) -> None:
        selection = Selection()
        selection.toggle(3)
        assert 3 in selection

        selection.toggle(3)
        assert 3 not in selection
        assert len(selection) == 0

    def test_select_all_valid_replaces_selection(self) -> None:
        summary = _summary()
        selection = Selection({2, 99})
        selection.select_all_valid(summary)

        assert list(selection) == [1, 3, 4]
        assert selection.is_all_valid_selected(summary) is True

    def test_deselect_all(self) -> None:
        summary = _summary()
        selection = Selection.initial(summary)
        selection.deselect_all()

        assert len(selection) == 0
        assert selection.is_all_valid_selected(summary) is False


class TestGetSelectedCards:
    def test_only_valid_and_selected(self) -> None:
        summary = _summary()
        cards = get_selected_cards(summary, Selection({1, 2, 4}))

        assert [card.front for card in cards] == ["one", "four"]

    def test_ascending_row_order_regardless_of_selection_order(self) -> None:
        cards = get_selected_cards(_summary(), [4, 3, 1])

        assert [card.front for card in cards] == ["one", "three", "four"]

    def test_unknown_rows_ignored(self) -> None:
        assert get_selected_cards(_summary(), {42}) == []

    def test_empty_selection(self) -> None:
        assert get_selected_cards(_summary(), Selection()) == []

    def test_does_not_mutate_selection(self) -> None:
        selection = Selection({1, 2})
        get_selected_cards(_summary(), selection)

        assert selection.row_numbers == {1, 2}


class TestGetValidCards:
    def test_all_valid_cards(self) -> None:
        cards = get_valid_cards(_summary())

        assert [card.front for card in cards] == ["one", "three", "four"]
