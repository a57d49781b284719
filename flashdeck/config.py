from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FLASHDECK_")

    app_name: str = "FlashDeck"
    debug: bool = False

    # Import capacity. The whole file is buffered in memory before parsing,
    # so these two caps bound the memory used by a single import attempt.
    max_import_rows: int = 1000
    max_file_size: int = 5 * 1024 * 1024


settings = Settings()


# =============================================================================
# IMPORT LIMITS
# =============================================================================

# Hard cap on data rows per import; rows beyond it are dropped before validation
MAX_IMPORT_ROWS = 1000

# Maximum upload size in bytes (5 MiB)
MAX_FILE_SIZE = 5 * 1024 * 1024

# Field length bounds (import is more lenient than manual card creation)
IMPORT_MIN_FRONT_LENGTH = 1
IMPORT_MAX_FRONT_LENGTH = 1000
IMPORT_MIN_BACK_LENGTH = 1
IMPORT_MAX_BACK_LENGTH = 5000

# Tag limits
IMPORT_MAX_TAGS_PER_CARD = 10
IMPORT_MAX_TAG_LENGTH = 50
