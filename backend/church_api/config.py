"""
Children's Church API — Application Configuration
===================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.

Environment variables keep the names the deployed service already uses
(PORT, CORS_ORIGIN) so existing hosting configuration carries over unchanged.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# What: Default location of the JSON document, next to the package directory
# Format: backend/data.json
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Attributes are grouped by concern for readability.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Path of the single JSON document holding both collections
    # Created on first run; never overwritten afterwards
    data_file: Path = Field(
        default=DEFAULT_DATA_FILE,
        description="Path of the JSON document store",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # What: Allowed origins for cross-origin requests
    # Format: Comma-separated URLs; "*" allows every origin
    cors_origin: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """
        What: Splits comma-separated CORS origins into a list.
        How:  A "*" anywhere in the list collapses it to ["*"].
        """
        origins = [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]
        if not origins or "*" in origins:
            return ["*"]
        return origins

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # What: Deployment label, reported in startup logs only
    environment: str = Field(default="development")

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATA_FILE and data_file both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
