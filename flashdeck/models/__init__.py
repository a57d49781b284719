from flashdeck.models.export import (
    DEFAULT_EXPORT_OPTIONS,
    Delimiter,
    ExportRecord,
    QuoteChar,
    SerializationOptions,
)
from flashdeck.models.failure import (
    FailureDetail,
    FailureKind,
    FileReadError,
    FileTooLargeError,
    FileTypeError,
    KnownError,
)
from flashdeck.models.flashcard import BookRef, CardStatus, CardType
from flashdeck.models.import_result import (
    ImportSummary,
    RawRecord,
    RowOutcome,
    ValidatedCard,
)

__all__ = [
    "BookRef",
    "CardStatus",
    "CardType",
    "DEFAULT_EXPORT_OPTIONS",
    "Delimiter",
    "ExportRecord",
    "FailureDetail",
    "FailureKind",
    "FileReadError",
    "FileTooLargeError",
    "FileTypeError",
    "ImportSummary",
    "KnownError",
    "QuoteChar",
    "RawRecord",
    "RowOutcome",
    "SerializationOptions",
    "ValidatedCard",
]
