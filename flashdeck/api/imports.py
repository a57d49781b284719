"""
Flashcard import API endpoints.

Runs uploaded or pasted CSV through the import pipeline and returns the
validation summary for preview. Nothing is persisted: the caller commits
the cards it gets back from the selection endpoint.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from flashdeck.config import settings
from flashdeck.models.failure import FailureKind, KnownError
from flashdeck.models.flashcard import BookRef, CardType
from flashdeck.models.import_result import ImportSummary
from flashdeck.parsers.csv_dialect import DEFAULT_QUOTE_CHAR
from flashdeck.parsers.flashcard_csv import ParsedDocument, parse_document
from flashdeck.services.file_guard import check_upload, read_upload_text
from flashdeck.services.import_aggregator import get_import_summary_text, validate_import
from flashdeck.services.selection import Selection, get_selected_cards

router = APIRouter(prefix="/flashcards/import", tags=["import"])

DelimiterParam = Literal[",", ";", "\t", "tab"]
QuoteParam = Literal['"', "'"]


class BookModel(BaseModel):
    """A catalog entry used for book matching."""

    id: str
    title: str


class RawRecordResponse(BaseModel):
    """The record as read from the file."""

    model_config = ConfigDict(from_attributes=True)

    front: str
    back: str
    type: str
    tags: str
    book: str


class ValidatedCardResponse(BaseModel):
    """A card ready to be committed."""

    model_config = ConfigDict(from_attributes=True)

    front: str
    back: str
    type: CardType
    tags: list[str] = Field(default_factory=list)
    book_id: str | None = None
    book_original: str | None = None


class RowOutcomeResponse(BaseModel):
    """Validation result for one row."""

    model_config = ConfigDict(from_attributes=True)

    row_number: int
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    card: ValidatedCardResponse | None = None
    original: RawRecordResponse


class ImportPreviewResponse(BaseModel):
    """Response model for an import preview."""

    total_rows: int
    valid_count: int
    invalid_count: int
    warning_count: int
    can_import: bool
    truncated: bool = Field(
        default=False,
        description="True if rows beyond the row cap were dropped before validation",
    )
    dropped_rows: int = 0
    summary_text: str = ""
    delimiter: str
    has_header: bool
    selected_rows: list[int] = Field(
        default_factory=list,
        description="Initial selection: every valid row",
    )
    rows: list[RowOutcomeResponse] = Field(default_factory=list)


class TextImportRequest(BaseModel):
    """Request model for importing pasted CSV text."""

    text: str = Field(
        ...,
        description="Raw CSV text",
        examples=["front,back,type,tags,book\nHello,World,vocab,greeting,"],
    )
    books: list[BookModel] | None = Field(
        default=None,
        description="Catalog to match the book column against",
    )
    delimiter: DelimiterParam | None = Field(
        default=None,
        description="Field delimiter; auto-detected when omitted",
    )
    has_header: bool | None = Field(
        default=None,
        description="Whether line 1 is a header; sniffed when omitted",
    )
    quote_char: QuoteParam = Field(
        default='"',
        description="Quote character the text was written with",
    )


class SelectionRequest(TextImportRequest):
    """Request model for resolving a selection to committable cards."""

    selected_rows: list[int] = Field(
        default_factory=list,
        description="Row numbers the user chose to import",
    )


class SelectionResponse(BaseModel):
    """Cards to commit, in row order."""

    count: int
    cards: list[ValidatedCardResponse] = Field(default_factory=list)


_books_adapter = TypeAdapter(list[BookModel])


def _to_http_error(error: KnownError) -> HTTPException:
    return HTTPException(
        status_code=error.status_code,
        detail=error.to_detail().model_dump(mode="json"),
    )


def _normalize_delimiter(delimiter: DelimiterParam | None) -> str | None:
    return "\t" if delimiter == "tab" else delimiter


def _to_book_refs(books: list[BookModel] | None) -> list[BookRef] | None:
    if books is None:
        return None
    return [BookRef(id=book.id, title=book.title) for book in books]


def _parse_books_field(raw: str | None) -> list[BookRef] | None:
    """Decode the multipart books field (a JSON array)."""
    if raw is None or not raw.strip():
        return None
    try:
        return _to_book_refs(_books_adapter.validate_json(raw))
    except ValidationError as e:
        raise _to_http_error(
            KnownError(
                kind=FailureKind.INVALID_INPUT,
                message="The books field must be a JSON array of {id, title} objects.",
                detail=str(e.errors()[:3]),
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        ) from e


def _require_text(text: str) -> None:
    if not text.strip():
        raise _to_http_error(
            KnownError(
                kind=FailureKind.INVALID_INPUT,
                message="Import text cannot be empty",
                suggestion="Paste at least one line of CSV.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        )


def _run(
    text: str,
    books: list[BookRef] | None,
    delimiter: DelimiterParam | None,
    has_header: bool | None,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> tuple[ParsedDocument, ImportSummary]:
    document = parse_document(
        text,
        delimiter=_normalize_delimiter(delimiter),
        has_header=has_header,
        quote_char=quote_char,
    )
    summary = validate_import(document.records, books, max_rows=settings.max_import_rows)
    return document, summary


def _to_preview(document: ParsedDocument, summary: ImportSummary) -> ImportPreviewResponse:
    return ImportPreviewResponse(
        total_rows=summary.total_rows,
        valid_count=summary.valid_count,
        invalid_count=summary.invalid_count,
        warning_count=summary.warning_count,
        can_import=summary.can_import,
        truncated=summary.truncated,
        dropped_rows=summary.dropped_rows,
        summary_text=get_import_summary_text(summary),
        delimiter=document.delimiter,
        has_header=document.has_header,
        selected_rows=list(Selection.initial(summary)),
        rows=[RowOutcomeResponse.model_validate(row) for row in summary.rows],
    )


@router.post("/preview", response_model=ImportPreviewResponse)
async def preview_upload(
    file: Annotated[UploadFile, File(description="CSV or TXT file")],
    books: Annotated[str | None, Form(description="JSON array of {id, title}")] = None,
    delimiter: Annotated[DelimiterParam | None, Form()] = None,
    has_header: Annotated[bool | None, Form()] = None,
    quote_char: Annotated[QuoteParam, Form()] = '"',
) -> ImportPreviewResponse:
    """
    Validate an uploaded CSV file.

    File-level failures (type, size, unreadable) are rejected before any
    parsing. Row-level problems are reported inside the summary; a file
    with zero valid rows still returns 200 with can_import=false.
    """
    catalog = _parse_books_field(books)

    try:
        check_upload(file.filename, file.content_type, file.size, settings.max_file_size)
        text = await read_upload_text(file, settings.max_file_size)
    except KnownError as e:
        raise _to_http_error(e) from e

    document, summary = _run(text, catalog, delimiter, has_header, quote_char)
    return _to_preview(document, summary)


@router.post("/text", response_model=ImportPreviewResponse)
async def preview_text(request: TextImportRequest) -> ImportPreviewResponse:
    """Validate pasted CSV text."""
    _require_text(request.text)

    document, summary = _run(
        request.text,
        _to_book_refs(request.books),
        request.delimiter,
        request.has_header,
        request.quote_char,
    )
    return _to_preview(document, summary)


@router.post("/selection", response_model=SelectionResponse)
async def resolve_selection(request: SelectionRequest) -> SelectionResponse:
    """
    Return the cards to commit for a selection.

    The text is re-validated so the result never depends on client-side
    state; selected row numbers that are invalid or unknown are ignored.
    """
    _require_text(request.text)

    _, summary = _run(
        request.text,
        _to_book_refs(request.books),
        request.delimiter,
        request.has_header,
        request.quote_char,
    )
    cards = get_selected_cards(summary, request.selected_rows)

    return SelectionResponse(
        count=len(cards),
        cards=[ValidatedCardResponse.model_validate(card) for card in cards],
    )
