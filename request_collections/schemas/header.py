"""
Pydantic schema for header and metadata entries.
"""

from pydantic import BaseModel


class HeaderEntry(BaseModel):
    """A single header (or gRPC metadata) entry. Order is significant."""
    name: str
    value: str = ""
    enabled: bool = True
    id: str | None = None
