"""
Request store: lookup, duplication, deletion and inheritance resolution
for requests of any kind.

HTTP and gRPC requests share the same shape as far as this module is
concerned (id, workspace_id, folder_id, sort_priority, authentication and a
header-like list). A RequestKind describes where they differ: the model,
the attribute holding the header entries, and how to delete the records
that depend on a request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy.orm import Session

from ..database import Base
from ..exceptions import FolderCycleError
from ..models.folder import Folder
from ..models.grpc_connection import GrpcConnection
from ..models.grpc_request import GrpcRequest
from ..models.http_request import HttpRequest
from ..models.http_response import HttpResponse
from ..models.workspace import Workspace
from .folder_tree import (
    ResolvedAuth,
    resolve_auth_for_folder,
    resolve_auth_for_workspace,
    resolve_headers_for_folder,
    resolve_headers_for_workspace,
)
from .repository import Repository, UpdateSource, clone_record
from .sort_priority import priority_after

logger = logging.getLogger(__name__)


def delete_all_http_responses_for_request(
    repo: Repository, request_id: str, source: UpdateSource
) -> list[HttpResponse]:
    """Delete every response recorded for an HTTP request."""
    responses = repo.find_many(HttpResponse, "request_id", request_id)
    return [repo.delete(response, source) for response in responses]


def delete_all_grpc_connections_for_request(
    repo: Repository, request_id: str, source: UpdateSource
) -> list[GrpcConnection]:
    """Delete every connection opened for a gRPC request."""
    connections = repo.find_many(GrpcConnection, "request_id", request_id)
    return [repo.delete(connection, source) for connection in connections]


@dataclass(frozen=True)
class RequestKind:
    """Kind-specific hooks for a request model."""
    model: type[Base]
    headers_attr: str
    delete_children: Callable[[Repository, str, UpdateSource], list[Any]]


HTTP_REQUEST_KIND = RequestKind(
    model=HttpRequest,
    headers_attr="headers",
    delete_children=delete_all_http_responses_for_request,
)

GRPC_REQUEST_KIND = RequestKind(
    model=GrpcRequest,
    headers_attr="metadata_",
    delete_children=delete_all_grpc_connections_for_request,
)


class RequestStore:
    """Operations on one kind of request, backed by a database session."""

    def __init__(self, db: Session, kind: RequestKind):
        self.repo = Repository(db)
        self.kind = kind
        self.model = kind.model

    def get_request(self, request_id: str):
        return self.repo.find_one(self.model, "id", request_id)

    def list_requests(self, workspace_id: str) -> list:
        return self.repo.find_many(self.model, "workspace_id", workspace_id)

    def upsert_request(self, request, source: UpdateSource):
        return self.repo.upsert(request, source)

    def delete_request(self, request, source: UpdateSource):
        """Delete a request after deleting every record that depends on it."""
        self.kind.delete_children(self.repo, request.id, source)
        return self.repo.delete(request, source)

    def delete_request_by_id(self, request_id: str, source: UpdateSource):
        return self.delete_request(self.get_request(request_id), source)

    def duplicate_request(self, request, source: UpdateSource):
        """
        Persist a copy of ``request`` placed directly after it among its siblings.

        Siblings are the requests of the same workspace sharing the same
        folder_id. No other sibling's sort_priority is changed.
        """
        new_request = clone_record(request)
        new_request.id = ""

        siblings = [
            r for r in self.list_requests(request.workspace_id)
            if r.folder_id == request.folder_id
        ]
        new_request.sort_priority = priority_after(request, siblings)

        duplicated = self.upsert_request(new_request, source)
        logger.info(
            "Duplicated %s %s as %s (sort_priority=%r)",
            self.model.__name__, request.id, duplicated.id, duplicated.sort_priority,
        )
        return duplicated

    def resolve_auth(self, request) -> ResolvedAuth:
        """
        Return the effective authentication for a request.

        The request's own settings win when it sets an authentication type;
        otherwise they come from the parent folder chain, then the workspace.
        """
        if request.authentication_type:
            return ResolvedAuth(
                request.authentication_type,
                dict(request.authentication or {}),
                request.id,
            )

        if request.folder_id is not None:
            folder = self.repo.find_one(Folder, "id", request.folder_id)
            return resolve_auth_for_folder(self.repo, folder)

        workspace = self.repo.find_one(Workspace, "id", request.workspace_id)
        return resolve_auth_for_workspace(workspace)

    def resolve_headers(self, request) -> list[dict]:
        """Inherited header entries, furthest ancestor first, then the request's own."""
        if request.folder_id is not None:
            folder = self.repo.find_one(Folder, "id", request.folder_id)
            headers = resolve_headers_for_folder(self.repo, folder)
        else:
            workspace = self.repo.find_one(Workspace, "id", request.workspace_id)
            headers = resolve_headers_for_workspace(workspace)

        headers.extend(dict(h) for h in getattr(request, self.kind.headers_attr) or [])
        return headers

    def list_requests_in_folder_recursive(self, folder_id: str) -> list:
        """
        Return every request inside a folder or any of its sub-folders.

        Depth first: each child folder is listed completely before the
        folder's own requests.

        Raises:
            FolderCycleError: if a folder is reached twice
        """
        requests = []
        seen: set[str] = set()
        # (folder_id, children_done)
        stack = [(folder_id, False)]

        while stack:
            current_id, children_done = stack.pop()
            if children_done:
                requests.extend(self.repo.find_many(self.model, "folder_id", current_id))
                continue

            if current_id in seen:
                raise FolderCycleError(current_id)
            seen.add(current_id)

            stack.append((current_id, True))
            children = self.repo.find_many(Folder, "folder_id", current_id)
            for child in reversed(children):
                stack.append((child.id, False))

        return requests


def http_request_store(db: Session) -> RequestStore:
    return RequestStore(db, HTTP_REQUEST_KIND)


def grpc_request_store(db: Session) -> RequestStore:
    return RequestStore(db, GRPC_REQUEST_KIND)
