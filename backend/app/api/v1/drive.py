import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import RedirectResponse

try:
    from ...core.config import settings  # type: ignore
    from ...schemas.drive import DriveImageLinkRead, DriveResolveBatch, THUMBNAIL_SIZE_PATTERN  # type: ignore
    from ...utils.drive import DriveImageLink, resolve_drive_image  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore
    from schemas.drive import DriveImageLinkRead, DriveResolveBatch, THUMBNAIL_SIZE_PATTERN  # type: ignore
    from utils.drive import DriveImageLink, resolve_drive_image  # type: ignore

router = APIRouter(prefix="/drive", tags=["drive"])
logger = logging.getLogger(__name__)


def _read(reference: str, size: str) -> DriveImageLinkRead:
    # resolved is a property on DriveImageLink; from_attributes picks it up
    return DriveImageLinkRead.model_validate(resolve_drive_image(reference, size), from_attributes=True)


def _redirect_or_404(link: DriveImageLink, url: str) -> RedirectResponse:
    # Unresolved input comes back unchanged from the formatter; never redirect to it.
    if not link.resolved or not url.lower().startswith(("http://", "https://")):
        raise HTTPException(status_code=404, detail="No Drive image found for reference")
    return RedirectResponse(url=url, status_code=307)


@router.get("/resolve", response_model=DriveImageLinkRead)
def resolve(
    ref: str = Query(..., description="Sharing link, HYPERLINK formula, image URL or file id"),
    size: Optional[str] = Query(None, pattern=THUMBNAIL_SIZE_PATTERN),
):
    """Resolve one reference into its file id plus view and thumbnail URLs."""
    return _read(ref, size or settings.default_thumbnail_size)


@router.post("/resolve", response_model=List[DriveImageLinkRead])
def resolve_batch(body: DriveResolveBatch):
    """Resolve many references at once (e.g. a spreadsheet column), keeping input order."""
    if len(body.references) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_batch_size} references per request",
        )
    size = body.size or settings.default_thumbnail_size
    items = [_read(ref, size) for ref in body.references]
    logger.info(
        "resolved %s/%s drive references (size=%s)",
        sum(1 for it in items if it.resolved),
        len(items),
        size,
    )
    return items


@router.get("/view")
def view(ref: str = Query(...)):
    """Redirect to the full-size image so the endpoint works as an <img src>."""
    link = resolve_drive_image(ref, settings.default_thumbnail_size)
    return _redirect_or_404(link, link.view_url)


@router.get("/thumbnail")
def thumbnail(
    ref: str = Query(...),
    size: Optional[str] = Query(None, pattern=THUMBNAIL_SIZE_PATTERN),
):
    link = resolve_drive_image(ref, size or settings.default_thumbnail_size)
    return _redirect_or_404(link, link.thumbnail_url)
