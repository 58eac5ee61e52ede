"""
Pydantic schemas for HTTP and gRPC request configurations.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .header import HeaderEntry


# HTTP methods supported by the system
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

# Body types supported for requests
BodyType = Literal["json", "form", "raw"]


class RequestBase(BaseModel):
    """Fields shared by every request kind."""
    workspace_id: str
    folder_id: str | None = None
    name: str = ""
    sort_priority: float = Field(default=0.0, allow_inf_nan=False)
    authentication_type: str | None = None
    authentication: dict[str, Any] = {}


class HttpRequestBase(RequestBase):
    """Base schema with common HTTP request fields."""
    method: HttpMethod = "GET"
    url: str = ""
    body_type: BodyType | None = None
    body: str | None = None
    headers: list[HeaderEntry] = []


class HttpRequestUpsert(HttpRequestBase):
    """Schema for creating (empty id) or replacing an HTTP request."""
    id: str = ""


class HttpRequestResponse(HttpRequestBase):
    """Schema for HTTP request response with all fields including system-generated ones."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GrpcRequestBase(RequestBase):
    """Base schema with common gRPC request fields."""
    url: str = ""
    service: str | None = None
    method: str | None = None
    message: str = ""
    # Stored on the model as ``metadata_``
    metadata_: list[HeaderEntry] = Field(
        default=[],
        validation_alias=AliasChoices("metadata_", "metadata"),
        serialization_alias="metadata",
    )


class GrpcRequestUpsert(GrpcRequestBase):
    """Schema for creating (empty id) or replacing a gRPC request."""
    id: str = ""


class GrpcRequestResponse(GrpcRequestBase):
    """Schema for gRPC request response with all fields including system-generated ones."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ResolvedAuthResponse(BaseModel):
    """Effective authentication of a request and the entity that supplied it."""
    authentication_type: str | None
    authentication: dict[str, Any]
    owner_id: str
