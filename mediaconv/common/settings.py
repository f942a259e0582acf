# mediaconv/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from mediaconv.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class ProbeConfig(BaseModel):
    # ceiling for one extraction pass; a timed-out probe yields no metadata
    timeout_sec: float = Field(300.0, gt=0)
    mediainfo_library: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MEDIAINFO_LIBRARY", "mediainfo_library"),
    )
    parse_speed: float = Field(0.5, ge=0.0, le=1.0)
    full_output: bool = True

    # canonical container names
    streaming_containers: List[str] = Field(default_factory=lambda: ["mp4", "mov"])
    matroska_containers: List[str] = Field(default_factory=lambda: ["mkv", "webm"])

    @field_validator("streaming_containers", "matroska_containers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return [s.lower() for s in csv_to_list(v)]

    @field_validator("full_output", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mediaconv"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    probe: ProbeConfig = ProbeConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v or "INFO").strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediaconv.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
