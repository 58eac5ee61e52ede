"""
HttpRequest model for storing HTTP request configurations.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, Text, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class HttpRequest(Base):
    """
    SQLAlchemy model for HTTP request configurations.

    Attributes:
        id: Unique identifier (``rq_`` prefix), empty until persisted
        workspace_id: Owning workspace
        folder_id: Optional owning folder, None for workspace-level requests
        name: Human-readable name for the request
        method: HTTP method
        url: Target URL
        body_type: Type of request body, if any
        body: Request body content
        sort_priority: Order within sibling requests (ascending)
        authentication_type: Auth type tag, None to inherit from the parent
        authentication: Auth settings, meaningful only with authentication_type
        headers: Request-local header entries
        created_at: Timestamp when the request was created
        updated_at: Timestamp when the request was last updated
    """
    __tablename__ = "http_requests"

    id_prefix = "rq"

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
    method: Mapped[str] = mapped_column(String(10), default="GET")
    url: Mapped[str] = mapped_column(Text, default="")
    body_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sort_priority: Mapped[float] = mapped_column(default=0.0)
    authentication_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    authentication: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    headers: Mapped[list[dict]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
