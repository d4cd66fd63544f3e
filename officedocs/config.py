from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: str = "development"
    log_level: str = "INFO"

    # Documents
    document_standard: str = "ISO 9001:2015"
    presentation_archive_months: int = Field(default=6, ge=0)
    contract_validity_years: int = Field(default=1, ge=0)


settings = Settings()
