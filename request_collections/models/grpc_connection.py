"""
GrpcConnection model for storing connections opened for a gRPC request.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base, utcnow


class GrpcConnection(Base):
    """
    SQLAlchemy model for gRPC connections.

    Attributes:
        id: Unique identifier (``gc_`` prefix)
        workspace_id: Owning workspace
        request_id: The gRPC request this connection was opened for
        service: Service called
        method: Method called
        status: Final gRPC status code, -1 while the connection is open
        elapsed_ms: Connection duration in milliseconds
    """
    __tablename__ = "grpc_connections"

    id_prefix = "gc"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default="")
    workspace_id: Mapped[str] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
    )
    request_id: Mapped[str] = mapped_column(
        ForeignKey("grpc_requests.id", ondelete="CASCADE"),
        index=True,
    )
    service: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    method: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[int] = mapped_column(Integer, default=-1)
    elapsed_ms: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
