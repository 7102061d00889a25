"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from typing import List, Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "INTEREST_CALC_"

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    allowed_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    log_level: LogLevel = "INFO"
    currency_symbol: str = "$"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from INTEREST_CALC_* variables; unset ones keep their defaults.

    Without an explicit mapping, a .env file in the working directory is loaded
    first (real environment variables win over it).
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    values = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in environ:
            values[name] = environ[key]
    return Settings.model_validate(values)
