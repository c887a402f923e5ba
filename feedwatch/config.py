"""
config.py
Service settings, read once from the environment or a .env file:
Basic Auth credentials, where the feed document lives in MongoDB (and how to
authenticate to it), and the timezone and window used to judge freshness.
Anything invalid fails here, before the server binds its port.
"""

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    auth_username: str = Field(min_length=1, alias="AUTH_USERNAME")
    auth_password: str = Field(min_length=1, alias="AUTH_PASSWORD")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    collection: str = Field(default="updates", alias="COLLECTION")
    doc: str = Field(default="latest", alias="DOC")

    mongo_uri: str = Field(default="mongodb://127.0.0.1:27017", alias="MONGO_URI")
    mongo_db: str = Field(default="feedwatch", alias="MONGO_DB")
    store_credentials_file: Path | None = Field(default=None, alias="STORE_CREDENTIALS_FILE")
    store_timeout_s: float = Field(default=5.0, gt=0, alias="STORE_TIMEOUT_S")

    timezone: str = Field(default="America/Sao_Paulo", alias="TIMEZONE")
    freshness_window_min: int = Field(default=45, gt=0, alias="FRESHNESS_WINDOW_MIN")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {v!r}") from exc
        return v

    @field_validator("store_credentials_file", mode="before")
    @classmethod
    def _blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("store_credentials_file")
    @classmethod
    def _credentials_file_exists(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_file():
            raise ValueError(f"store credentials file not found: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level {v!r}")
        return v

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
