"""
Workspace model, the root of the request containment tree.

A workspace carries the base authentication and base headers that every
folder and request inside it inherits unless overridden.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class Workspace(Base):
    """
    SQLAlchemy model for workspaces.

    Attributes:
        id: Unique identifier (``wk_`` prefix)
        name: Human-readable name
        authentication_type: Base auth type tag, None when no auth is configured
        authentication: Base auth settings
        headers: Base header entries, applied before any folder or request headers
        created_at: Timestamp when the workspace was created
        updated_at: Timestamp when the workspace was last updated
    """
    __tablename__ = "workspaces"

    id_prefix = "wk"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default="")
    name: Mapped[str] = mapped_column(String(255), default="")
    authentication_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    authentication: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    headers: Mapped[list[dict]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
