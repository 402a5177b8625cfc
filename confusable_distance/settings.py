"""Runtime settings for confusable table loading and refresh.

Values come from the environment; nothing here is read on the distance hot
path, only when the shared table is first built or refreshed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFUSABLES_URL = "https://www.unicode.org/Public/security/latest/confusables.txt"
DEFAULT_HTTP_TIMEOUT_S = 30.0

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", populate_by_name=True)

    # Optional JSON table (flat or compact) used instead of the bundled data.
    confusables_path: Optional[Path] = Field(
        None,
        validation_alias=AliasChoices("CONFUSABLES_PATH"),
    )
    confusables_url: str = Field(
        DEFAULT_CONFUSABLES_URL,
        validation_alias=AliasChoices("CONFUSABLES_URL"),
    )
    http_timeout_s: float = Field(
        DEFAULT_HTTP_TIMEOUT_S,
        gt=0,
        le=600,
        validation_alias=AliasChoices("CONFUSABLES_HTTP_TIMEOUT_S"),
    )
    log_level: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
    )
    log_json: bool = Field(
        False,
        validation_alias=AliasChoices("LOG_JSON"),
    )

    @field_validator("confusables_path", mode="before")
    @classmethod
    def _blank_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        text = str(value or "INFO").strip().upper()
        if text == "WARN":
            text = "WARNING"
        if text not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return text


def get_settings() -> Settings:
    return Settings()
