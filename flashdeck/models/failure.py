"""
File-level failure classification.

Row problems are never exceptions: they travel as strings inside
RowOutcome. The exceptions here are reserved for gating failures that
stop an import attempt before any parsing happens.

Failure kinds:
- INVALID_FILE_TYPE: Extension and MIME type are both outside the allow-list
- FILE_TOO_LARGE: Upload exceeds the byte cap
- FILE_UNREADABLE: Genuine I/O or decoding failure while reading
- INVALID_INPUT: Malformed request payload (API boundary only)
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_FILE_TYPE = "invalid_file_type"
    FILE_TOO_LARGE = "file_too_large"
    FILE_UNREADABLE = "file_unreadable"
    INVALID_INPUT = "invalid_input"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a serializable FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class FileTypeError(KnownError):
    """Raised when an upload is neither a CSV nor a plain-text file."""

    def __init__(self, filename: str, content_type: str):
        self.filename = filename
        self.content_type = content_type
        super().__init__(
            kind=FailureKind.INVALID_FILE_TYPE,
            message="Please select a CSV file.",
            detail=f"filename={filename!r} content_type={content_type!r}",
            suggestion="Save the spreadsheet as .csv or .txt and try again.",
            status_code=415,
        )


class FileTooLargeError(KnownError):
    """Raised when an upload exceeds the configured byte cap."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            kind=FailureKind.FILE_TOO_LARGE,
            message=f"File is too large. The maximum size is {limit // (1024 * 1024)} MB.",
            detail=f"size={size} limit={limit}",
            suggestion="Split the file into smaller parts.",
            status_code=413,
        )


class FileReadError(KnownError):
    """Raised when an upload cannot be read or decoded as text."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            kind=FailureKind.FILE_UNREADABLE,
            message="Failed to read file.",
            detail=reason,
            suggestion="Check that the file is UTF-8 encoded text.",
            status_code=400,
        )
