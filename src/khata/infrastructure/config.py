"""Runtime settings, read from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from khata.logging import get_logger

log = get_logger("config")

DEFAULT_VISION_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    openai_api_key: str | None
    openai_base_url: str | None
    vision_model: str


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings() -> Settings:
    """Build Settings from the process environment.

    A ``.env`` found by walking up from the working directory is loaded
    first; variables already set in the environment win.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
        log.debug("Loaded .env from %s", dotenv_path)

    data_dir = Path(_clean(os.environ.get("KHATA_DATA_DIR")) or "data")
    return Settings(
        data_dir=data_dir.expanduser(),
        openai_api_key=_clean(os.environ.get("OPENAI_API_KEY")),
        openai_base_url=_clean(os.environ.get("OPENAI_BASE_URL")),
        vision_model=_clean(os.environ.get("KHATA_VISION_MODEL")) or DEFAULT_VISION_MODEL,
    )
