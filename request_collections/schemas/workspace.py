"""
Pydantic schemas for workspaces.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from .header import HeaderEntry


class WorkspaceBase(BaseModel):
    """Base schema with common workspace fields."""
    name: str
    authentication_type: str | None = None
    authentication: dict[str, Any] = {}
    headers: list[HeaderEntry] = []


class WorkspaceUpsert(WorkspaceBase):
    """Schema for creating (empty id) or replacing a workspace."""
    id: str = ""


class WorkspaceResponse(WorkspaceBase):
    """Schema for workspace response with all fields."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
