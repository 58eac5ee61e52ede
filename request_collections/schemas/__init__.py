"""
Pydantic schemas package.

Exports all schemas for API request/response validation.
"""

from .header import HeaderEntry

from .workspace import (
    WorkspaceBase,
    WorkspaceUpsert,
    WorkspaceResponse,
)

from .folder import (
    FolderBase,
    FolderUpsert,
    FolderResponse,
)

from .request import (
    HttpMethod,
    BodyType,
    RequestBase,
    HttpRequestBase,
    HttpRequestUpsert,
    HttpRequestResponse,
    GrpcRequestBase,
    GrpcRequestUpsert,
    GrpcRequestResponse,
    ResolvedAuthResponse,
)

__all__ = [
    "HeaderEntry",
    # Workspace schemas
    "WorkspaceBase",
    "WorkspaceUpsert",
    "WorkspaceResponse",
    # Folder schemas
    "FolderBase",
    "FolderUpsert",
    "FolderResponse",
    # Request schemas
    "HttpMethod",
    "BodyType",
    "RequestBase",
    "HttpRequestBase",
    "HttpRequestUpsert",
    "HttpRequestResponse",
    "GrpcRequestBase",
    "GrpcRequestUpsert",
    "GrpcRequestResponse",
    "ResolvedAuthResponse",
]
