"""Configuration via pydantic-settings — 12-factor app style."""
from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """clf2tab configuration, loaded from env vars / .env file, then CLI flags.

    Built once at startup and passed to the parser; instances are immutable.
    """

    skip_validation: bool = Field(
        default=False,
        description="Accept every field regardless of content (tokenization is unchanged)",
    )
    encoding: str = Field(default="utf-8", description="Input text encoding")
    log_level: LogLevel = Field(default="WARNING", description="Logging level for the rich stderr handler")

    class Config:
        env_prefix = "CLF2TAB_"
        env_file = ".env"
        frozen = True
