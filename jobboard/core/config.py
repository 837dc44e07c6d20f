"""Application configuration management."""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.db"
    database_echo: bool = False

    # Uploads
    upload_dir: str = "uploads"
    cv_subdir: str = "cvs"
    max_upload_size: int = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="Largest accepted resume upload, in bytes",
    )
    allowed_content_types: list[str] = ["application/pdf"]

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
