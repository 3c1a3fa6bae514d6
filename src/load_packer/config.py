"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Settings read from the environment."""

    log_level: str = Field(default="INFO", description="Root log level")
    default_presets: list[str] = Field(
        default_factory=list,
        description="Bin presets used when a request names no bins",
    )


def get_settings() -> Settings:
    presets = os.getenv("LOAD_PACKER_DEFAULT_PRESETS", "")
    return Settings(
        log_level=os.getenv("LOAD_PACKER_LOG_LEVEL", "INFO").upper(),
        default_presets=[p.strip() for p in presets.split(",") if p.strip()],
    )


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger (no-op if one already exists)."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
