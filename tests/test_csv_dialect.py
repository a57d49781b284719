"""
Tests for the flashcard CSV dialect primitives.

Note on trimming: the tokenizer trims every field, even quoted content,
so a quoted value loses intentional edge whitespace once parsed. The
round-trip property is therefore unescape(escape(v)) == v.strip().
"""

import pytest

from flashdeck.parsers.csv_dialect import (
    detect_delimiter,
    escape,
    split_records,
    tokenize_line,
    trim_field,
    unescape,
)


class TestEscape:
    def test_plain_value_unchanged(self) -> None:
        assert escape("Hello") == "Hello"

    def test_empty_value_never_quoted(self) -> None:
        assert escape("") == ""

    def test_value_with_delimiter_quoted(self) -> None:
        assert escape("a,b") == '"a,b"'

    def test_embedded_quotes_doubled(self) -> None:
        assert escape('say "hi"') == '"say ""hi"""'

    def test_newlines_force_quoting(self) -> None:
        assert escape("line1\nline2") == '"line1\nline2"'
        assert escape("line1\rline2") == '"line1\rline2"'

    def test_other_delimiter_not_quoted(self) -> None:
        """Only the active delimiter triggers quoting."""
        assert escape("a,b", delimiter=";") == "a,b"
        assert escape("a;b", delimiter=";") == '"a;b"'

    def test_custom_quote_char(self) -> None:
        assert escape("it's", quote_char="'") == "'it''s'"
        assert escape('say "hi"', quote_char="'") == 'say "hi"'


class TestUnescape:
    def test_plain_value_unchanged(self) -> None:
        assert unescape("Hello") == "Hello"

    def test_empty_value(self) -> None:
        assert unescape("") == ""

    def test_strips_enclosing_quotes(self) -> None:
        assert unescape('"a,b"') == "a,b"

    def test_collapses_doubled_quotes(self) -> None:
        assert unescape('"say ""hi"""') == 'say "hi"'

    def test_trims_whitespace(self) -> None:
        assert unescape("  padded  ") == "padded"

    def test_lone_quote_not_stripped(self) -> None:
        assert unescape('"') == '"'

    def test_trims_outside_quotes_only(self) -> None:
        """Whitespace inside the quotes survives unescape itself."""
        assert unescape('  " inner "  ') == " inner "


class TestRoundTrip:
    @pytest.mark.parametrize("value", ["plain", "with space", "tab\tinside", "x-y_z"])
    def test_safe_strings_are_fixed_points(self, value: str) -> None:
        assert escape(value) == value
        assert unescape(value) == value

    @pytest.mark.parametrize(
        "value",
        ["a,b", 'say "hi"', "line1\nline2", '" both ,"', "with, comma"],
    )
    def test_special_values_round_trip_modulo_trim(self, value: str) -> None:
        assert unescape(escape(value)) == value.strip()

    def test_trim_applies_inside_quotes_via_tokenizer(self) -> None:
        """Intentionally quoted whitespace is lost when parsed as a line."""
        assert tokenize_line(escape("  keep me  ,x")) == ["keep me  ,x"]
        assert trim_field("  x  ") == "x"


class TestDetectDelimiter:
    def test_empty_defaults_to_comma(self) -> None:
        assert detect_delimiter("") == ","

    def test_comma(self) -> None:
        assert detect_delimiter("front,back,type") == ","

    def test_semicolon_beats_comma(self) -> None:
        assert detect_delimiter("front;back;type,x") == ";"

    def test_tab_beats_both(self) -> None:
        assert detect_delimiter("front\tback\ttype;a,b") == "\t"

    def test_tab_tie_falls_through(self) -> None:
        """Tab must strictly exceed both others."""
        assert detect_delimiter("a\tb,c") == ","
        assert detect_delimiter("a\tb;c") == ";"

    def test_semicolon_tie_with_comma_is_comma(self) -> None:
        assert detect_delimiter("a;b,c") == ","

    def test_only_first_line_counts(self) -> None:
        assert detect_delimiter("a,b,c\nx;y;z;w;v") == ","
        assert detect_delimiter("a;b\r\nx,y,z,w") == ";"

    def test_no_delimiters_is_comma(self) -> None:
        assert detect_delimiter("just text") == ","


class TestTokenizeLine:
    def test_simple_fields(self) -> None:
        assert tokenize_line("a,b,c") == ["a", "b", "c"]

    def test_fields_are_trimmed(self) -> None:
        assert tokenize_line(" a , b ") == ["a", "b"]

    def test_trailing_delimiter_yields_empty_field(self) -> None:
        assert tokenize_line("a,b,") == ["a", "b", ""]

    def test_empty_line_yields_one_field(self) -> None:
        assert tokenize_line("") == [""]

    def test_quoted_delimiter(self) -> None:
        assert tokenize_line('Hello,"a,b",c') == ["Hello", "a,b", "c"]

    def test_escaped_quote(self) -> None:
        assert tokenize_line('"say ""hi""",x') == ['say "hi"', "x"]

    def test_embedded_newline(self) -> None:
        assert tokenize_line('"line1\nline2",x') == ["line1\nline2", "x"]

    def test_semicolon_delimiter(self) -> None:
        assert tokenize_line('a;"b;c";d', delimiter=";") == ["a", "b;c", "d"]

    def test_tab_delimiter(self) -> None:
        assert tokenize_line("a\tb\t\tc", delimiter="\t") == ["a", "b", "", "c"]

    def test_unbalanced_quote_swallows_rest(self) -> None:
        assert tokenize_line('a,"b,c') == ["a", "b,c"]

    def test_custom_quote_char(self) -> None:
        assert tokenize_line("'a,b',c", quote_char="'") == ["a,b", "c"]

    def test_quote_inside_value_is_literal(self) -> None:
        assert tokenize_line('12" ruler,tool') == ['12" ruler', "tool"]
        assert tokenize_line("don't,x", quote_char="'") == ["don't", "x"]

    def test_quote_after_leading_whitespace_opens(self) -> None:
        assert tokenize_line('a,  "b,c" ,d') == ["a", "b,c", "d"]

    def test_text_after_closing_quote_kept(self) -> None:
        assert tokenize_line('"a"b",c') == ['ab"', "c"]


class TestSplitRecords:
    def test_lf_and_crlf(self) -> None:
        assert split_records("a\nb\r\nc") == ["a", "b", "c"]

    def test_blank_lines_dropped(self) -> None:
        assert split_records("a\n\n   \nb\n") == ["a", "b"]

    def test_quoted_newline_kept_in_record(self) -> None:
        assert split_records('a,"x\ny",b\nc') == ['a,"x\ny",b', "c"]

    def test_quoted_blank_line_kept(self) -> None:
        assert split_records('"x\n\ny"\nz') == ['"x\n\ny"', "z"]

    def test_doubled_quotes_do_not_open(self) -> None:
        assert split_records('"say ""hi""",a\nb') == ['"say ""hi""",a', "b"]

    def test_unterminated_quote_falls_back_to_lines(self) -> None:
        assert split_records('a,"open\nb\nc') == ['a,"open', "b", "c"]

    def test_empty_document(self) -> None:
        assert split_records("") == []

    def test_stray_quote_does_not_join_lines(self) -> None:
        content = 'front,back\n12" ruler,tool\nApple,fruit\n5" nail,hardware\n'

        assert split_records(content) == [
            "front,back",
            '12" ruler,tool',
            "Apple,fruit",
            '5" nail,hardware',
        ]

    def test_quote_state_uses_delimiter(self) -> None:
        assert split_records('a;"x\ny";b\nc', delimiter=";") == ['a;"x\ny";b', "c"]
