"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration for the local store and the server's JSON files."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "invoices.db"
    invoices_file: str = "invoices.json"
    date_file: str = "date.json"

    # SQLite settings
    pool_size: int = 2
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name

    @property
    def invoices_path(self) -> Path:
        return self.data_dir / self.invoices_file

    @property
    def date_path(self) -> Path:
        return self.data_dir / self.date_file


class RemoteSettings(BaseSettings):
    """Remote invoice API configuration."""

    model_config = SettingsConfigDict(env_prefix="REMOTE_")

    base_url: str = "http://localhost:8000/api"
    timeout: float = 10.0


class PdfSettings(BaseSettings):
    """Template PDF configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    template_path: Path | None = None
    template_name: str = "invoice-template.pdf"
    output_dir: Path = Path("data/pdfs")


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "invoicekit"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    remote: RemoteSettings = Field(default_factory=RemoteSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings

    @property
    def template_candidates(self) -> list[Path]:
        """Template locations in lookup order."""
        candidates = []
        if self.pdf.template_path:
            candidates.append(self.pdf.template_path)
        candidates.append(self.storage.data_dir / self.pdf.template_name)
        return candidates


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
