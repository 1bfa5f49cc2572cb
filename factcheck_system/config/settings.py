"""Application settings using Pydantic BaseSettings for environment variable management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        verification_seed: Seed for reproducible random draws. None selects
            the hash-based draw source.
        draw_salt: Salt mixed into hash-based draws
        max_entities: Maximum number of entities kept per analysis
        real_threshold: Aggregate score at or above which content is Likely Real
        fake_threshold: Aggregate score at or below which content is Likely Fake
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    verification_seed: Optional[int] = Field(
        default=None,
        description="Seed for the random draw source (None = hash draws)"
    )
    draw_salt: str = Field(
        default="",
        description="Salt mixed into hash-based draws"
    )
    max_entities: int = Field(
        default=10,
        ge=0,
        le=10,
        description="Maximum entities kept per analysis"
    )
    real_threshold: int = Field(
        default=70,
        description="Aggregate score at or above which content is Likely Real"
    )
    fake_threshold: int = Field(
        default=40,
        description="Aggregate score at or below which content is Likely Fake"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance - import this throughout the application
settings = Settings()
