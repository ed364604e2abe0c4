"""Resolution outputs. Recomputed on demand, never persisted."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ResolvedColorSet(BaseModel):
    """Effective element colors for one folder; None means use the theme default."""
    icon_color: Optional[str] = None
    folder_color: Optional[str] = None
    text_color: Optional[str] = None


class FolderStyle(BaseModel):
    """Everything a renderer needs to paint one folder row."""
    path: str
    base_color: Optional[str] = None
    icon: Optional[str] = None
    icon_color: Optional[str] = None
    folder_color: Optional[str] = None
    text_color: Optional[str] = None
    background_opacity: Optional[float] = None
    icon_size: int = 20

    @property
    def has_background(self) -> bool:
        return self.folder_color is not None and bool(self.background_opacity)
