"""Application configuration.

Loads settings from environment variables (prefix ``HYPERMARKET_``) and an
optional ``.env`` file, with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Render log events as JSON")

    # Catalog
    root_category_name: str = Field(default="Root", min_length=1)
    load_sample_data: bool = True

    # Presentation
    currency_symbol: str = "$"
    indent_width: int = Field(default=4, ge=0)
    screen_width: int | None = Field(
        default=None,
        ge=1,
        description="Width used to centre the banner; console width when unset",
    )
    welcome_message: str = "Welcome To Your Grocery List"

    model_config = SettingsConfigDict(
        env_prefix="HYPERMARKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
