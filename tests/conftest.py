import pytest
from httpx import ASGITransport, AsyncClient

from flashdeck.main import app
from flashdeck.models.flashcard import BookRef


class FakeUpload:
    """In-memory stand-in for an uploaded file."""

    def __init__(
        self,
        data: bytes,
        filename: str | None = "cards.csv",
        content_type: str | None = "text/csv",
        size: int | None = None,
        error: OSError | None = None,
    ) -> None:
        self.data = data
        self.filename = filename
        self.content_type = content_type
        self.size = len(data) if size is None else size
        self.error = error
        self.reads = 0
        self.requested: int | None = None

    async def read(self, size: int = -1) -> bytes:
        self.reads += 1
        self.requested = size
        if self.error is not None:
            raise self.error
        return self.data if size < 0 else self.data[:size]


@pytest.fixture
def sample_csv() -> str:
    """Small import file with a header, one warning row and one invalid row."""
    return (
        "front,back,type,tags,book\n"
        'Hello,World,vocab,"a,b",\n'
        '"What is 2+2?",4,CONCEPT,math,The Little Prince\n'
        ",Missing front,QUOTE,,\n"
        "Bonjour,Good day,mystery,,Unknown Book\n"
    )


@pytest.fixture
def books() -> list[BookRef]:
    """Book catalog supplied by the caller."""
    return [
        BookRef(id="book-1", title="The Little Prince"),
        BookRef(id="book-2", title="Dune"),
    ]


@pytest.fixture
def make_upload() -> type[FakeUpload]:
    """Factory for in-memory uploads."""
    return FakeUpload


@pytest.fixture
async def client():
    """Async test client bound to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
