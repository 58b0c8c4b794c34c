from __future__ import annotations

from typing import Any, Dict
import logging

APP_LOGGERS = ("backend", "backend.app")


def resolve_level(level: int | str) -> int:
    """Map 'debug'/'INFO'/20 to a logging level int, falling back to INFO."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def get_uvicorn_log_config(level: int | str = logging.INFO, use_colors: bool = True) -> Dict[str, Any]:
    """Return a logging dictConfig for uvicorn and the app loggers.

    - Time format: HH:MM:SS
    - backend.* loggers share uvicorn's default handler so drive resolution
      logs line up with request logs.
    """
    level = resolve_level(level)
    time_format = "%H:%M:%S"
    default_fmt = "%(asctime)s %(levelprefix)s [%(name)s] %(message)s"
    access_fmt = "%(asctime)s %(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s"

    def _handler(formatter: str) -> Dict[str, Any]:
        return {
            "class": "logging.StreamHandler",
            "formatter": formatter,
            "level": level,
            "stream": "ext://sys.stdout",
        }

    loggers: Dict[str, Any] = {
        "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
        "uvicorn.error": {"handlers": ["default"], "level": level, "propagate": False},
        "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
    }
    for name in APP_LOGGERS:
        loggers[name] = {"handlers": ["default"], "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": default_fmt,
                "datefmt": time_format,
                "use_colors": use_colors,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": access_fmt,
                "datefmt": time_format,
                "use_colors": use_colors,
            },
        },
        "handlers": {
            "default": _handler("default"),
            "access": _handler("access"),
        },
        "loggers": loggers,
        "root": {"handlers": ["default"], "level": level},
    }
