"""
FlashDeck services.

Validation, aggregation and serialization for flashcard CSV import/export.
"""

from flashdeck.services.book_resolver import BookResolution, BookResolver
from flashdeck.services.card_type_normalizer import (
    TYPE_ALIASES,
    VALID_TYPES,
    normalize_card_type,
    type_warning,
)
from flashdeck.services.csv_generator import (
    generate_document,
    generate_export_filename,
    generate_header,
    generate_row,
    generate_template,
)
from flashdeck.services.file_guard import (
    check_upload,
    format_file_size,
    is_valid_file_size,
    is_valid_file_type,
    read_upload_text,
)
from flashdeck.services.import_aggregator import (
    get_import_summary_text,
    has_errors,
    has_warnings,
    validate_import,
)
from flashdeck.services.import_workflow import (
    ImportAttemptTracker,
    import_text,
    import_upload,
)
from flashdeck.services.row_validator import validate_row
from flashdeck.services.selection import Selection, get_selected_cards, get_valid_cards
from flashdeck.services.tag_parser import parse_tags

__all__ = [
    "BookResolution",
    "BookResolver",
    "ImportAttemptTracker",
    "Selection",
    "TYPE_ALIASES",
    "VALID_TYPES",
    "check_upload",
    "format_file_size",
    "generate_document",
    "generate_export_filename",
    "generate_header",
    "generate_row",
    "generate_template",
    "get_import_summary_text",
    "get_selected_cards",
    "get_valid_cards",
    "has_errors",
    "has_warnings",
    "import_text",
    "import_upload",
    "is_valid_file_size",
    "is_valid_file_type",
    "normalize_card_type",
    "parse_tags",
    "read_upload_text",
    "type_warning",
    "validate_import",
    "validate_row",
]
