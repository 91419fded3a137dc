from __future__ import annotations

from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    max_file_size_mb: int = Field(50)
    log_level: str = Field("INFO")
    log_file_path: str = Field("logs/fastmcp_page_tools.log")
    temp_dir: str = Field("temp_files")
    retention_hours: int = Field(24)
    server_name: str = Field("pdf-page-tools")
    server_version: str = Field("0.1.0")

    @field_validator("log_level")
    def _upper(cls, v: str) -> str:  # noqa: N805
        return v.upper()

    @field_validator("retention_hours", "max_file_size_mb")
    def _positive(cls, v: int) -> int:  # noqa: N805
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @property
    def temp_path(self) -> Path:
        return Path(self.temp_dir).resolve()

    @property
    def log_path(self) -> Path:
        return Path(self.log_file_path).resolve()

    @property
    def retention_seconds(self) -> int:
        return self.retention_hours * 60 * 60


settings = Settings()
