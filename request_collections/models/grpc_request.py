"""
GrpcRequest model for storing RPC request configurations.

Mirrors HttpRequest for everything the hierarchy engine cares about;
its header-like entries live in ``metadata``.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, Text, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class GrpcRequest(Base):
    """
    SQLAlchemy model for gRPC request configurations.

    Attributes:
        id: Unique identifier (``gr_`` prefix), empty until persisted
        workspace_id: Owning workspace
        folder_id: Optional owning folder
        name: Human-readable name
        url: Server address
        service: Fully qualified service name
        method: RPC method name
        message: Request message as JSON text
        sort_priority: Order within sibling requests (ascending)
        authentication_type: Auth type tag, None to inherit from the parent
        authentication: Auth settings
        metadata_: Request-local metadata entries (column ``metadata``)
    """
    __tablename__ = "grpc_requests"

    id_prefix = "gr"

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
    url: Mapped[str] = mapped_column(Text, default="")
    service: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    method: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[str] = mapped_column(Text, default="")
    sort_priority: Mapped[float] = mapped_column(default=0.0)
    authentication_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    authentication: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    # "metadata" is reserved on declarative classes
    metadata_: Mapped[list[dict]] = mapped_column("metadata", JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
