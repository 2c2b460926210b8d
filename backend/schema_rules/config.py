"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Numeric bounds: truncate comparison/range operands to int
    TRUNCATE_NUMERIC_BOUNDS: bool = True

    # Dialect used when a document carries no "openapi" key
    OPENAPI_VERSION_FALLBACK: str = "3.1.0"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
