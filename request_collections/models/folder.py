"""
Folder model for organizing requests.

Folders are nested inside a workspace, optionally inside another folder,
and can override authentication and add headers for everything below them.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class Folder(Base):
    """
    SQLAlchemy model for folders.

    Deleting a folder cascades (at the database level) to all contained
    sub-folders and requests.

    Attributes:
        id: Unique identifier (``fl_`` prefix)
        workspace_id: Owning workspace
        folder_id: Optional parent folder (for nesting)
        name: Human-readable name for the folder
        sort_priority: Order within sibling folders
        authentication_type: Auth type tag, None to inherit from the parent
        authentication: Auth settings, meaningful only with authentication_type
        headers: Header entries added on top of the inherited ones
        created_at: Timestamp when the folder was created
        updated_at: Timestamp when the folder was last updated
    """
    __tablename__ = "folders"

    id_prefix = "fl"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default="")
    workspace_id: Mapped[str] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        index=True,
    )
    folder_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), default="")
    sort_priority: Mapped[float] = mapped_column(default=0.0)
    authentication_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    authentication: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    headers: Mapped[list[dict]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
