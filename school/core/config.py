"""
Centralized configuration management using Pydantic Settings.

Settings are loaded from environment variables and an optional .env file.
With nothing set, the defaults reproduce the fixed demo behavior: a
School.db file in the working directory and INFO logging to stderr.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Components never read these implicitly; the driver passes the
    database URL into Database explicitly.
    """

    # Database Configuration (SQLite)
    database_url: str = Field(
        default="sqlite:///./School.db",
        description="SQLAlchemy database URL (SQLite file or in-memory)"
    )
    sql_echo: bool = Field(
        default=False,
        description="Echo emitted SQL through the sqlalchemy.engine logger"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit structured JSON log records instead of plain text"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """
        Validate database URL format.

        Only SQLite is supported: the schema reset deletes the database
        file, which has no meaning for a server database.
        """
        if not v or v.strip() == "":
            raise ValueError("DATABASE_URL is required and cannot be empty")

        valid_schemes = ["sqlite", "sqlite+pysqlite"]
        if not any(v.startswith(scheme + "://") for scheme in valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}. "
                f"Got: {v[:20]}..."
            )

        # URI filenames would hide the real path from the reset logic
        if "uri=true" in v.lower() or "/file:" in v:
            raise ValueError(
                "DATABASE_URL must name a plain SQLite file path or :memory:, "
                "not a file: URI"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown ones."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}. Got: {v}"
            )
        return level


# Global settings instance, used by the driver for its defaults
settings = Settings()
