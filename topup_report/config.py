"""
Configuration settings for the organization top-up report.

Uses Pydantic Settings to load environment variables for input sources, the
report destination and logging. Relative source paths are resolved against
`data_dir`.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Sources
    data_dir: Path = Field(Path("."), alias="DATA_DIR")
    people_source: str = Field("users.json", alias="PEOPLE_SOURCE")
    organizations_source: str = Field("companies.json", alias="ORGANIZATIONS_SOURCE")

    # Report
    output_path: str = Field("output.txt", alias="REPORT_OUTPUT")
    legacy_balance_label: bool = Field(True, alias="LEGACY_BALANCE_LABEL")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def resolve(self, name: str) -> Path:
        """Resolve a source or destination name against `data_dir`."""
        path = Path(name)
        if path.is_absolute():
            return path
        return self.data_dir / path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
