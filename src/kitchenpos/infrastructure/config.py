"""Runtime settings, read from the environment (and a ``.env`` file if present)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root when installed in editable mode.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings:
    """kitchenpos configuration."""

    # ===== STORAGE =====
    DATA_DIR: Path = Path(os.getenv("KITCHENPOS_DATA_DIR", str(_PROJECT_ROOT / "data")))

    # ===== PROFANITY CHECK =====
    PURGOMALUM_BASE_URL: str = os.getenv("PURGOMALUM_BASE_URL", "https://www.purgomalum.com")
    PURGOMALUM_TIMEOUT: float = float(os.getenv("PURGOMALUM_TIMEOUT", "5"))

    # ===== LOGGING =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


settings = Settings()
