from datetime import date

from flashdeck.models.export import DEFAULT_EXPORT_OPTIONS, ExportRecord, SerializationOptions
from flashdeck.models.flashcard import CardStatus, CardType
from flashdeck.parsers.flashcard_csv import parse_document
from flashdeck.services.csv_generator import (
    generate_document,
    generate_export_filename,
    generate_header,
    generate_row,
    generate_template,
)
from flashdeck.services.import_aggregator import validate_import

ALL_COLUMNS = SerializationOptions(
    include_stats=True,
    include_status=True,
    include_created_at=True,
)


def _record(**overrides) -> ExportRecord:
    values = {
        "front": "Hello",
        "back": "World",
        "type": CardType.VOCABULARY,
        "status": CardStatus.REVIEW,
        "tags": ("a", "b"),
        "book_title": "Dune",
        "ease_factor": 2.5,
        "interval": 6,
        "due_date": "2026-01-02T00:00:00.000Z",
        "created_at": "2025-12-01T00:00:00.000Z",
    }
    values.update(overrides)
    return ExportRecord(**values)


class TestGenerateHeader:
    def test_default_columns(self) -> None:
        assert generate_header(DEFAULT_EXPORT_OPTIONS) == "front,back,type,tags,book"

    def test_optional_columns_fixed_order(self) -> None:
        assert generate_header(ALL_COLUMNS) == (
            "front,back,type,tags,book,status,easeFactor,interval,dueDate,createdAt"
        )

    def test_stats_only(self) -> None:
        options = SerializationOptions(include_stats=True)

        assert generate_header(options).endswith("book,easeFactor,interval,dueDate")

    def test_delimiter(self) -> None:
        options = SerializationOptions(delimiter="\t")

        assert generate_header(options) == "front\tback\ttype\ttags\tbook"


class TestGenerateRow:
    def test_default_row(self) -> None:
        assert generate_row(_record()) == 'Hello,World,VOCABULARY,"a,b",Dune'

    def test_missing_book_is_empty_not_null(self) -> None:
        row = generate_row(_record(book_title=None, tags=()))

        assert row == "Hello,World,VOCABULARY,,"
        assert "None" not in row

    def test_text_fields_escaped(self) -> None:
        row = generate_row(_record(front='say "hi"', back="x\ny", tags=()))

        assert row.startswith('"say ""hi""","x\ny",')

    def test_all_optional_columns(self) -> None:
        row = generate_row(_record(), ALL_COLUMNS)

        assert row == (
            'Hello,World,VOCABULARY,"a,b",Dune,REVIEW,2.5,6,'
            "2026-01-02T00:00:00.000Z,2025-12-01T00:00:00.000Z"
        )

    def test_whole_ease_factor_has_no_decimal(self) -> None:
        options = SerializationOptions(include_stats=True)

        assert ",2,6," in generate_row(_record(ease_factor=2.0), options)

    def test_semicolon_delimiter_keeps_commas_unquoted(self) -> None:
        options = SerializationOptions(delimiter=";")

        assert generate_row(_record(), options) == "Hello;World;VOCABULARY;a,b;Dune"

    def test_single_quote_char(self) -> None:
        options = SerializationOptions(quote_char="'")

        assert generate_row(_record(front="it's"), options).startswith("'it''s',")

    def test_record_not_mutated(self) -> None:
        record = _record()
        generate_row(record, ALL_COLUMNS)

        assert record == _record()


class TestGenerateDocument:
    def test_empty_is_header_only(self) -> None:
        assert generate_document([], DEFAULT_EXPORT_OPTIONS) == "front,back,type,tags,book"

    def test_rows_newline_joined_without_trailing_newline(self) -> None:
        content = generate_document([_record(), _record(front="Bye")])

        lines = content.split("\n")
        assert len(lines) == 3
        assert lines[2].startswith("Bye,")
        assert not content.endswith("\n")

    def test_output_reimports(self) -> None:
        """Exported cards come back through the parser and validator intact."""
        records = [
            _record(),
            _record(front='Quote "this"', back="Line one\nLine two", book_title=None),
            _record(front="Semi;colon", type=CardType.QUOTE, tags=("x",)),
        ]
        content = generate_document(records, ALL_COLUMNS)
        document = parse_document(content)
        summary = validate_import(document.records)

        assert document.has_header is True
        assert summary.valid_count == 3
        cards = [row.card for row in summary.rows]
        assert cards[0] is not None and cards[0].tags == ("a", "b")
        assert cards[1] is not None and cards[1].front == 'Quote "this"'
        assert cards[1].back == "Line one\nLine two"
        assert cards[2] is not None and cards[2].type == CardType.QUOTE


class TestTemplate:
    def test_template_header_and_rows(self) -> None:
        lines = generate_template().split("\n")

        assert lines[0] == "front,back,type,tags,book"
        assert len(lines) == 4

    def test_template_imports_cleanly(self) -> None:
        summary = validate_import(parse_document(generate_template()).records)

        assert summary.valid_count == 3
        assert summary.warning_count == 0


class TestExportFilename:
    def test_default(self) -> None:
        assert generate_export_filename(today=date(2026, 10, 19)) == (
            "flashcards_2026-10-19.csv"
        )

    def test_custom_prefix_and_extension(self) -> None:
        name = generate_export_filename("deck", "txt", today=date(2025, 1, 5))

        assert name == "deck_2025-01-05.txt"

    def test_uses_current_date(self) -> None:
        name = generate_export_filename()

        assert name.startswith("flashcards_")
        assert name.endswith(".csv")
        assert len(name) == len("flashcards_YYYY-MM-DD.csv")
