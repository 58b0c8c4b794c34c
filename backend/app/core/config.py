from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel
try:
    from ..app_meta import __version__, __app_name__  # type: ignore
except Exception:  # pragma: no cover
    from app_meta import __version__, __app_name__  # type: ignore


# backend/.env wins over the repository-root .env; neither overrides the real environment.
_backend_env = Path(__file__).resolve().parents[2] / ".env"
_root_env = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=str(_backend_env), override=False)
load_dotenv(dotenv_path=str(_root_env), override=False)


def _split_csv(value: str | None) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


class Settings(BaseModel):
    # Name and version are sourced from code, not environment
    app_name: str = __app_name__
    version: str = __version__

    # CORS
    cors_origins: List[str] = _split_csv(os.environ.get("CORS_ORIGINS")) or [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Drive links
    default_thumbnail_size: str = os.environ.get("DRIVE_THUMBNAIL_SIZE") or "w1200"
    max_batch_size: int = _int_env("DRIVE_MAX_BATCH", 500)

    log_level: str = os.environ.get("APP_LOG_LEVEL", "INFO").upper()


settings = Settings()
