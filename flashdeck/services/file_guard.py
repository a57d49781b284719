"""
Upload pre-flight checks and the single fallible read.

The two checks are pure predicates evaluated before a byte is read.
Reading is the only suspension point of an import and the only step
that can genuinely fail; it fails with FileReadError and nothing else.

CAPACITY: the whole file is buffered in memory and decoded at once.
The byte cap is what keeps that bounded.
"""

import logging
from typing import Protocol

from flashdeck.config import MAX_FILE_SIZE
from flashdeck.models.failure import FileReadError, FileTooLargeError, FileTypeError

logger = logging.getLogger(__name__)

VALID_MIME_TYPES = frozenset(
    {
        "text/csv",
        "text/plain",
        "application/csv",
        "application/vnd.ms-excel",
    }
)

VALID_EXTENSIONS = (".csv", ".txt")


class Upload(Protocol):
    """The slice of an uploaded file the guard needs (UploadFile fits)."""

    filename: str | None
    content_type: str | None
    size: int | None

    async def read(self, size: int = -1) -> bytes: ...


def is_valid_file_type(filename: str | None, content_type: str | None) -> bool:
    """
    Accept CSV-ish uploads.

    Passes if the MIME type is allow-listed or empty (browsers often send
    nothing for .csv), or if the filename has an accepted extension.
    """
    mime = content_type or ""
    has_valid_type = mime in VALID_MIME_TYPES or mime == ""
    has_valid_extension = (filename or "").lower().endswith(VALID_EXTENSIONS)
    return has_valid_type or has_valid_extension


def is_valid_file_size(size: int, limit: int = MAX_FILE_SIZE) -> bool:
    """Check the byte size against the cap (inclusive)."""
    return size <= limit


def check_upload(
    filename: str | None,
    content_type: str | None,
    size: int | None,
    limit: int = MAX_FILE_SIZE,
) -> None:
    """
    Run both pre-flight checks.

    Args:
        filename: Client-supplied filename
        content_type: Client-supplied MIME type
        size: Byte size if known; None defers the size check to the read

    Raises:
        FileTypeError: If the type check fails
        FileTooLargeError: If the size is known and over the cap
    """
    if not is_valid_file_type(filename, content_type):
        logger.info(
            "upload_rejected",
            extra={
                "reason": "file_type",
                "upload_filename": filename,
                "content_type": content_type,
            },
        )
        raise FileTypeError(filename or "", content_type or "")

    if size is not None and not is_valid_file_size(size, limit):
        logger.info(
            "upload_rejected",
            extra={"reason": "file_size", "upload_filename": filename, "size": size},
        )
        raise FileTooLargeError(size, limit)


def decode_text(data: bytes) -> str:
    """
    Decode uploaded bytes as UTF-8, tolerating a leading BOM.

    Raises:
        FileReadError: If the bytes are not valid UTF-8
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileReadError(f"Not valid UTF-8: {e.reason} at byte {e.start}") from e


async def read_upload_text(upload: Upload, limit: int = MAX_FILE_SIZE) -> str:
    """
    Read an upload fully and decode it.

    At most limit + 1 bytes are read, and the size is re-checked on what
    came back, so an undeclared oversized body is never buffered whole.

    Raises:
        FileTooLargeError: If the content exceeds the cap
        FileReadError: On I/O or decoding failure
    """
    try:
        data = await upload.read(limit + 1)
    except OSError as e:
        logger.warning(
            "upload_read_failed",
            extra={"upload_filename": upload.filename, "error": str(e)},
        )
        raise FileReadError(str(e)) from e

    if not is_valid_file_size(len(data), limit):
        raise FileTooLargeError(len(data), limit)

    return decode_text(data)


def format_file_size(size: int) -> str:
    """Human-readable size: "512 B", "1.5 KB", "2.0 MB"."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
