from fastapi import APIRouter

try:
    from ...core.config import settings  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/info")
def info():
    """Return application info: name, version and the default thumbnail size."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "default_thumbnail_size": settings.default_thumbnail_size,
    }
