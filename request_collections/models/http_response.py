"""
HttpResponse model for storing responses received for an HTTP request.

Responses are dependent records: they are deleted before their request.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class HttpResponse(Base):
    """
    SQLAlchemy model for HTTP responses.

    Attributes:
        id: Unique identifier (``rs_`` prefix)
        workspace_id: Owning workspace
        request_id: The HTTP request this response belongs to
        status: HTTP status code
        elapsed_ms: Request execution time in milliseconds
        body: Response body
        created_at: Timestamp when the response was recorded
    """
    __tablename__ = "http_responses"

    id_prefix = "rs"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default="")
    workspace_id: Mapped[str] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
    )
    request_id: Mapped[str] = mapped_column(
        ForeignKey("http_requests.id", ondelete="CASCADE"),
        index=True,
    )
    status: Mapped[int] = mapped_column(Integer, default=0)
    elapsed_ms: Mapped[int] = mapped_column(Integer, default=0)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
