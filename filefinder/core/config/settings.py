# File: filefinder/core/config/settings.py


class Settings:
    # --- Units ---
    MEGABYTE_IN_BYTES: int = 1024 * 1024

    # --- Search Defaults ---
    # The CLI falls back to these when no flags are given
    DEFAULT_EXTENSION: str = "jpg"
    DEFAULT_MIN_SIZE_MB: int = 5

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


settings = Settings()
