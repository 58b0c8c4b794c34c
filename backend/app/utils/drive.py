"""
Utilities for turning Google Drive image references into displayable URLs.

Accepted references:
- Sheets formulas: =HYPERLINK("https://drive.google.com/open?id=..."; "label")
- Sharing links: https://drive.google.com/file/d/<ID>/view?usp=sharing
- Legacy/open links: https://drive.google.com/open?id=<ID>
- Direct image URLs (.jpg/.jpeg/.png/.webp/.gif), passed through untouched
- Bare file identifiers

All functions are pure and never raise on bad input.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from urllib.parse import SplitResult, parse_qs, urlsplit

logger = logging.getLogger(__name__)

DEFAULT_THUMBNAIL_SIZE = "w1200"

VIEW_URL_TEMPLATE = "https://drive.google.com/uc?export=view&id={file_id}"
THUMBNAIL_URL_TEMPLATE = "https://drive.google.com/thumbnail?id={file_id}&sz={size}"

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif")

_HYPERLINK_RE = re.compile(
    r'^=HYPERLINK\(\s*"([^"]+)"\s*[;,]\s*".*"\s*\)$',
    flags=re.IGNORECASE,
)
_QUOTED_RE = re.compile(r'^"(.*)"$')
_IMAGE_SUFFIX_RE = re.compile(r"\.(?:%s)\Z" % "|".join(IMAGE_EXTENSIONS), flags=re.IGNORECASE)
_HTTP_RE = re.compile(r"^https?://", flags=re.IGNORECASE)
_DRIVE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{10,}\Z")

# Ordered fallbacks over the raw text; first match wins.
_TEXT_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ("file_path", re.compile(r"/file/d/([A-Za-z0-9_-]{10,})")),
    ("id_param", re.compile(r"[?&]id=([A-Za-z0-9_-]{10,})")),
    ("bare_token", re.compile(r"\b([A-Za-z0-9_-]{25,})\b", flags=re.ASCII)),
]


@dataclass(frozen=True)
class DriveImageLink:
    reference: str
    file_id: Optional[str]
    direct: bool
    view_url: str
    thumbnail_url: str
    size: str

    @property
    def resolved(self) -> bool:
        return self.direct or self.file_id is not None


def clean_reference(raw: Optional[str]) -> str:
    """Unwrap a Sheets HYPERLINK formula and one layer of double quotes."""
    if not raw:
        return ""
    s = str(raw).strip()
    s = _HYPERLINK_RE.sub(r"\1", s)
    s = _QUOTED_RE.sub(r"\1", s).strip()
    return s


def _parse_url(s: str) -> Optional[SplitResult]:
    try:
        u = urlsplit(s)
    except ValueError:
        return None
    if not u.scheme or not u.netloc:
        return None
    return u


def _id_from_query(u: SplitResult) -> Optional[str]:
    values = parse_qs(u.query).get("id")
    if values and values[0]:
        return values[0]
    return None


def _id_after_d_segment(u: SplitResult) -> Optional[str]:
    parts = [p for p in u.path.split("/") if p]
    if "d" in parts:
        idx = parts.index("d")
        if idx + 1 < len(parts):
            return parts[idx + 1]
    return None


_URL_MATCHERS: List[Tuple[str, Callable[[SplitResult], Optional[str]]]] = [
    ("query_id", _id_from_query),
    ("d_segment", _id_after_d_segment),
]


def is_direct_image_url(reference: Optional[str]) -> bool:
    """True when the reference already points straight at a raster image."""
    if not reference:
        return False
    if _IMAGE_SUFFIX_RE.search(reference):
        return True
    u = _parse_url(clean_reference(reference))
    return bool(u and _IMAGE_SUFFIX_RE.search(u.path))


def is_drive_id(value: Optional[str]) -> bool:
    return bool(value and _DRIVE_ID_RE.match(value))


def extract_drive_id(reference: Optional[str]) -> Optional[str]:
    """Extract a Drive file id from a formula, link or bare id.

    Returns None when nothing id-like is found, including for direct image
    URLs, which carry no Drive id. Callers decide what to do with the input
    in that case.
    """
    s = clean_reference(reference)
    if not s:
        return None

    u = _parse_url(s)
    if u is not None:
        if _IMAGE_SUFFIX_RE.search(u.path):
            return None
        for name, matcher in _URL_MATCHERS:
            file_id = matcher(u)
            if file_id:
                logger.debug("drive id via %s: %s", name, file_id)
                return file_id

    # Bare-token fallback also runs after a URL parse that found nothing.
    for name, pat in _TEXT_PATTERNS:
        m = pat.search(s)
        if m:
            logger.debug("drive id via %s: %s", name, m.group(1))
            return m.group(1)
    return None


def _format(reference: Optional[str], render: Callable[[str], str]) -> str:
    if not reference:
        return ""
    if _IMAGE_SUFFIX_RE.search(reference):
        return reference
    cleaned = clean_reference(reference)
    u = _parse_url(cleaned)
    if u is not None and _IMAGE_SUFFIX_RE.search(u.path):
        return cleaned

    file_id = extract_drive_id(reference)
    if not file_id:
        return reference
    if _HTTP_RE.match(file_id):
        return file_id
    return render(file_id)


def drive_view_url(reference: Optional[str]) -> str:
    """Return a full-size displayable URL, or the input when nothing resolves."""
    return _format(reference, lambda file_id: VIEW_URL_TEMPLATE.format(file_id=file_id))


def drive_thumbnail_url(reference: Optional[str], size: str = DEFAULT_THUMBNAIL_SIZE) -> str:
    """Return a resized thumbnail URL (size like 'w1200', 'h400', 's220')."""
    size = size or DEFAULT_THUMBNAIL_SIZE
    return _format(
        reference,
        lambda file_id: THUMBNAIL_URL_TEMPLATE.format(file_id=file_id, size=size),
    )


def resolve_drive_image(reference: Optional[str], size: str = DEFAULT_THUMBNAIL_SIZE) -> DriveImageLink:
    size = size or DEFAULT_THUMBNAIL_SIZE
    direct = is_direct_image_url(reference)
    return DriveImageLink(
        reference=reference or "",
        file_id=None if direct else extract_drive_id(reference),
        direct=direct,
        view_url=drive_view_url(reference),
        thumbnail_url=drive_thumbnail_url(reference, size),
        size=size,
    )
