"""Export configuration with environment variable support."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Export configuration loaded from environment variables.

    Loads from environment (REPORT_EXPORT_*), .env file, or defaults.
    The API token and base URL have no defaults and must be supplied.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    api_token: str
    base_url: str
    auth_scheme: str = "Token"
    api_timeout: float = 30

    # Export job
    export_format: str = "xml"
    target_file: str = "export.zip"

    # Polling
    poll_interval: float = Field(default=5.0, gt=0)
    max_poll_attempts: int | None = Field(default=None, ge=1)
    poll_timeout: float | None = Field(default=None, gt=0)

    # Output
    output_dir: Path = Path(".")

    # Stop the whole run at the first failing project
    fail_fast: bool = False

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so REST paths join cleanly."""
        return v.rstrip("/")

    @field_validator("max_poll_attempts", "poll_timeout", mode="before")
    @classmethod
    def parse_null_limit(cls, v):
        """Convert 'null' string to None."""
        if isinstance(v, str) and v.lower() in ("null", "none", ""):
            return None
        return v

    @field_validator("output_dir", mode="after")
    @classmethod
    def create_output_dir(cls, v: Path) -> Path:
        """Create the output directory if it doesn't exist."""
        v.mkdir(parents=True, exist_ok=True)
        return v.resolve()
