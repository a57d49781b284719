"""
Flashcard CSV dialect primitives.

THIS MODULE HANDLES SYNTAX ONLY.

The dialect is deliberately small and is NOT a full RFC 4180 reader:
- One of three delimiters: comma, semicolon, tab
- A configurable quote character; a doubled quote inside quotes is literal
- Every field is whitespace-trimmed, including quoted content

A quote character only opens a quoted field where a field starts (at
the beginning of the line or after a delimiter, leading whitespace
allowed), which is the only place escape() puts one. Anywhere else it
is literal text.

Nothing here raises on malformed input. An unbalanced opening quote
swallows the rest of its record into the current field.
"""

import re

COMMA = ","
SEMICOLON = ";"
TAB = "\t"
DEFAULT_QUOTE_CHAR = '"'

# Line break in either convention
LINE_BREAK = re.compile(r"\r?\n")


def trim_field(value: str) -> str:
    """
    Trim surrounding whitespace from a field.

    Applied unconditionally, so whitespace deliberately placed inside
    quotes is lost. A strict dialect would swap this out.
    """
    return value.strip()


def escape(value: str, delimiter: str = COMMA, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """
    Quote a single value for output when it needs quoting.

    A value containing the delimiter, the quote character, CR or LF is
    wrapped in quote characters with embedded quotes doubled. Anything
    else, including the empty string, is returned unchanged.
    """
    if not value:
        return ""

    needs_quoting = (
        delimiter in value or quote_char in value or "\n" in value or "\r" in value
    )
    if not needs_quoting:
        return value

    escaped = value.replace(quote_char, quote_char * 2)
    return f"{quote_char}{escaped}{quote_char}"


def unescape(value: str, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """
    Reverse escape() for a single value.

    Trims, strips one pair of enclosing quotes if both are present,
    then collapses doubled quote characters.
    """
    if not value:
        return ""

    result = trim_field(value)

    if len(result) >= 2 and result.startswith(quote_char) and result.endswith(quote_char):
        result = result[1:-1]

    return result.replace(quote_char * 2, quote_char)


def detect_delimiter(content: str) -> str:
    """
    Guess the delimiter from the first line of content.

    Tab wins if it outnumbers both comma and semicolon, then semicolon
    if it outnumbers comma, otherwise comma. Empty content is comma.
    """
    first_line = LINE_BREAK.split(content, maxsplit=1)[0] if content else ""

    commas = first_line.count(COMMA)
    semicolons = first_line.count(SEMICOLON)
    tabs = first_line.count(TAB)

    if tabs > commas and tabs > semicolons:
        return TAB
    if semicolons > commas:
        return SEMICOLON
    return COMMA


def tokenize_line(
    line: str,
    delimiter: str = COMMA,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> list[str]:
    """
    Split one record into trimmed, unquoted fields.

    Single left-to-right scan with one in-quotes flag. Inside quotes the
    delimiter and line breaks are literal and a doubled quote is one
    literal quote. A quote that does not start a field is kept as text.
    The final field is always emitted, so an empty line yields [""].
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    at_field_start = True
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if in_quotes:
            if char == quote_char:
                if i + 1 < length and line[i + 1] == quote_char:
                    # Escaped quote
                    current.append(quote_char)
                    i += 2
                    continue
                in_quotes = False
            else:
                current.append(char)
        elif char == delimiter:
            fields.append(trim_field("".join(current)))
            current = []
            at_field_start = True
        elif char == quote_char and at_field_start:
            in_quotes = True
            at_field_start = False
        else:
            current.append(char)
            if not char.isspace():
                at_field_start = False

        i += 1

    fields.append(trim_field("".join(current)))
    return fields


def _ends_inside_quotes(
    line: str,
    in_quotes: bool,
    delimiter: str,
    quote_char: str,
) -> bool:
    """Scan one physical line with the tokenizer's quoting rules."""
    at_field_start = not in_quotes
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if in_quotes:
            if char == quote_char:
                if i + 1 < length and line[i + 1] == quote_char:
                    i += 2
                    continue
                in_quotes = False
        elif char == delimiter:
            at_field_start = True
        elif char == quote_char and at_field_start:
            in_quotes = True
            at_field_start = False
        elif not char.isspace():
            at_field_start = False

        i += 1

    return in_quotes


def split_records(
    content: str,
    delimiter: str = COMMA,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> list[str]:
    """
    Split a document into logical records, dropping blank ones.

    Splits on CRLF or LF. A physical line that leaves a quoted field open
    is joined (with LF) to the following lines until the quote closes, so
    quoted values with embedded newlines stay in one record. Only a quote
    at the start of a field opens one, so a stray quote inside a value
    (12" ruler) never joins lines. If the document ends with a quote
    still open, the pending lines are emitted one per record, as a plain
    line split would.
    """
    records: list[str] = []
    pending: list[str] = []
    in_quotes = False

    for physical in LINE_BREAK.split(content):
        pending.append(physical)
        in_quotes = _ends_inside_quotes(physical, in_quotes, delimiter, quote_char)
        if in_quotes:
            continue
        records.append("\n".join(pending))
        pending = []

    if pending:
        records.extend(pending)

    return [record for record in records if record.strip()]
