"""
Models package for the request collections service.

Exports all SQLAlchemy models for database operations.
"""

from .workspace import Workspace
from .folder import Folder
from .http_request import HttpRequest
from .grpc_request import GrpcRequest
from .http_response import HttpResponse
from .grpc_connection import GrpcConnection

__all__ = [
    "Workspace",
    "Folder",
    "HttpRequest",
    "GrpcRequest",
    "HttpResponse",
    "GrpcConnection",
]
