from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

THUMBNAIL_SIZE_PATTERN = r"^[whs]\d+(-[whs]\d+)*$"


class DriveImageLinkRead(BaseModel):
    reference: str
    file_id: Optional[str] = None
    direct: bool = False
    resolved: bool = False
    view_url: str
    thumbnail_url: str
    size: str

    class Config:
        from_attributes = True


class DriveResolveBatch(BaseModel):
    references: List[str] = Field(default_factory=list)
    size: Optional[str] = Field(default=None, pattern=THUMBNAIL_SIZE_PATTERN)
