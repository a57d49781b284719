"""
Flashcard export API endpoints.

Serializes caller-supplied cards to CSV and serves the starter template.
The browser download itself is the client's job; responses carry a
suggested filename in Content-Disposition.
"""

from typing import Literal

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from flashdeck.models.export import ExportRecord, SerializationOptions
from flashdeck.models.flashcard import CardStatus, CardType
from flashdeck.services.csv_generator import (
    TEMPLATE_FILENAME,
    generate_document,
    generate_export_filename,
    generate_template,
)

router = APIRouter(prefix="/flashcards", tags=["export"])

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


class ExportCardModel(BaseModel):
    """A card to export."""

    front: str
    back: str
    type: CardType = CardType.CUSTOM
    status: CardStatus = CardStatus.NEW
    tags: list[str] = Field(default_factory=list)
    book_title: str | None = None
    ease_factor: float = 2.5
    interval: int = 0
    due_date: str = ""
    created_at: str = ""


class ExportOptionsModel(BaseModel):
    """Which optional columns to include and which dialect to write."""

    include_stats: bool = False
    include_status: bool = False
    include_created_at: bool = False
    delimiter: Literal[",", ";", "\t"] = ","
    quote_char: Literal['"', "'"] = '"'


class ExportRequest(BaseModel):
    """Request model for a CSV export."""

    cards: list[ExportCardModel] = Field(default_factory=list)
    options: ExportOptionsModel = Field(default_factory=ExportOptionsModel)
    filename_prefix: str = Field(
        default="flashcards",
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Prefix of the suggested filename",
    )


def _attachment(content: str, filename: str) -> PlainTextResponse:
    return PlainTextResponse(
        content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/export", response_class=PlainTextResponse)
async def export_cards(request: ExportRequest) -> PlainTextResponse:
    """
    Export cards as CSV.

    An empty card list produces a header-only document.
    """
    records = [
        ExportRecord(
            front=card.front,
            back=card.back,
            type=card.type,
            status=card.status,
            tags=tuple(card.tags),
            book_title=card.book_title,
            ease_factor=card.ease_factor,
            interval=card.interval,
            due_date=card.due_date,
            created_at=card.created_at,
        )
        for card in request.cards
    ]
    options = SerializationOptions(**request.options.model_dump())

    content = generate_document(records, options)
    return _attachment(content, generate_export_filename(request.filename_prefix))


@router.get("/template", response_class=PlainTextResponse)
async def download_template() -> PlainTextResponse:
    """Starter CSV with sample cards."""
    return _attachment(generate_template(), TEMPLATE_FILENAME)
