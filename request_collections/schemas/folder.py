"""
Pydantic schemas for folders.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .header import HeaderEntry


class FolderBase(BaseModel):
    """Base schema with common folder fields."""
    workspace_id: str
    folder_id: str | None = None
    name: str
    sort_priority: float = Field(default=0.0, allow_inf_nan=False)
    authentication_type: str | None = None
    authentication: dict[str, Any] = {}
    headers: list[HeaderEntry] = []


class FolderUpsert(FolderBase):
    """Schema for creating (empty id) or replacing a folder."""
    id: str = ""


class FolderResponse(FolderBase):
    """Schema for folder response with all fields."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
