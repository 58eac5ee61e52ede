# Services package

from .repository import Repository, UpdateSource, clone_record, generate_id
from .sort_priority import DUPLICATE_GAP, priority_after, sort_by_priority
from .folder_tree import (
    ResolvedAuth,
    detect_circular_reference,
    get_folder_chain,
    resolve_auth_for_folder,
    resolve_auth_for_workspace,
    resolve_headers_for_folder,
    resolve_headers_for_workspace,
)
from .request_store import (
    GRPC_REQUEST_KIND,
    HTTP_REQUEST_KIND,
    RequestKind,
    RequestStore,
    grpc_request_store,
    http_request_store,
)

__all__ = [
    "Repository",
    "UpdateSource",
    "clone_record",
    "generate_id",
    "DUPLICATE_GAP",
    "priority_after",
    "sort_by_priority",
    "ResolvedAuth",
    "detect_circular_reference",
    "get_folder_chain",
    "resolve_auth_for_folder",
    "resolve_auth_for_workspace",
    "resolve_headers_for_folder",
    "resolve_headers_for_workspace",
    "GRPC_REQUEST_KIND",
    "HTTP_REQUEST_KIND",
    "RequestKind",
    "RequestStore",
    "grpc_request_store",
    "http_request_store",
]
