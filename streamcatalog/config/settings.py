import logging
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Supplier snapshots (written by the external fetch layer)
    supplier_data_dir: Path = Field(
        Path("./suppliers"),
        description="Directory holding '<supplier>-data.json' snapshot files.",
    )
    suppliers: List[str] = Field(
        default_factory=lambda: ["tom", "sarah", "wendy"],
        description="Suppliers to load, in order. Input order drives clustering order.",
    )
    embed_url_template: str = Field(
        "https://embedsports.top/embed/{source}/{id}/1",
        description="Template for rendering {source, id} stream descriptors into URLs.",
    )

    # Output
    output_path: Path = Field(
        Path("./master-data.json"), description="Where the catalog JSON dump is written."
    )

    # Normalization Settings
    plausible_past_days: int = Field(
        365,
        ge=0,
        description="Timestamps older than this many days are flagged implausible.",
    )
    plausible_future_days: int = Field(
        7,
        ge=0,
        description="Timestamps further ahead than this many days are flagged implausible.",
    )
    missing_timestamp_offset_minutes: int = Field(
        60,
        ge=0,
        description="Offset from 'now' used for non-live records without a usable timestamp.",
    )
    min_stream_url_length: int = Field(
        6, ge=1, description="Stream entries shorter than this are dropped as invalid."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            logging.warning(f"Unknown LOG_LEVEL {value!r}, falling back to INFO.")
            return "INFO"
        return level

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Reads AppSettings from the environment and .env; exits on invalid values."""
    try:
        return AppSettings()
    except ValueError as e:
        # ValidationError and pydantic-settings' SettingsError are both ValueErrors
        logging.error(f"Invalid stream catalog configuration: {e}")
        raise SystemExit(
            "Stream catalog settings are invalid; check SUPPLIER_DATA_DIR, SUPPLIERS "
            "and the normalization limits in .env or the environment."
        ) from e


settings: AppSettings = load_settings()
