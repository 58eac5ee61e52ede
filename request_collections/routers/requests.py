"""
Request management API routes.

The same set of routes is mounted once per request kind:
/api/http-requests and /api/grpc-requests.
"""

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import WorkspaceMismatchError
from ..models.folder import Folder
from ..models.workspace import Workspace
from ..schemas.header import HeaderEntry
from ..schemas.request import (
    GrpcRequestResponse,
    GrpcRequestUpsert,
    HttpRequestResponse,
    HttpRequestUpsert,
    ResolvedAuthResponse,
)
from ..services.repository import UpdateSource
from ..services.request_store import (
    GRPC_REQUEST_KIND,
    HTTP_REQUEST_KIND,
    RequestKind,
    RequestStore,
)
from ..services.sort_priority import sort_by_priority


def get_update_source(
    x_update_source: UpdateSource = Header(UpdateSource.WINDOW),
) -> UpdateSource:
    """Read the origin of a mutation from the X-Update-Source header."""
    return x_update_source


def build_request_router(
    segment: str,
    kind: RequestKind,
    upsert_schema: type,
    response_schema: type,
    tag: str,
) -> APIRouter:
    """
    Build the CRUD, duplicate and resolution routes for one request kind.

    Args:
        segment: URL path segment, e.g. "http-requests"
        kind: Request kind the routes operate on
        upsert_schema: Body schema for create/replace
        response_schema: Schema returned for a request
        tag: OpenAPI tag
    """
    router = APIRouter(prefix="/api", tags=[tag])

    def get_store(db: Session = Depends(get_db)) -> RequestStore:
        return RequestStore(db, kind)

    @router.get(f"/{segment}", response_model=list[response_schema])
    def list_requests(workspace_id: str, store: RequestStore = Depends(get_store)):
        """List the requests of a workspace ordered by sort priority."""
        return sort_by_priority(store.list_requests(workspace_id))

    @router.post(f"/{segment}", response_model=response_schema)
    def upsert_request(
        request_data: upsert_schema,
        store: RequestStore = Depends(get_store),
        source: UpdateSource = Depends(get_update_source),
    ):
        """
        Create a request (empty id) or replace an existing one.

        Raises:
            ResourceNotFoundError: 404 if the workspace or folder does not exist
            WorkspaceMismatchError: 409 if the folder belongs to another workspace
        """
        store.repo.find_one(Workspace, "id", request_data.workspace_id)
        if request_data.folder_id is not None:
            folder = store.repo.find_one(Folder, "id", request_data.folder_id)
            if folder.workspace_id != request_data.workspace_id:
                raise WorkspaceMismatchError("Folder", folder.id, request_data.workspace_id)
        return store.upsert_request(kind.model(**request_data.model_dump()), source)

    @router.get(f"/{segment}/{{request_id}}", response_model=response_schema)
    def get_request(request_id: str, store: RequestStore = Depends(get_store)):
        """Get a single request by ID."""
        return store.get_request(request_id)

    @router.delete(f"/{segment}/{{request_id}}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_request(
        request_id: str,
        store: RequestStore = Depends(get_store),
        source: UpdateSource = Depends(get_update_source),
    ):
        """Delete a request and everything recorded for it."""
        store.delete_request_by_id(request_id, source)
        return None

    @router.post(
        f"/{segment}/{{request_id}}/duplicate",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
    )
    def duplicate_request(
        request_id: str,
        store: RequestStore = Depends(get_store),
        source: UpdateSource = Depends(get_update_source),
    ):
        """Copy a request and place the copy right after it."""
        return store.duplicate_request(store.get_request(request_id), source)

    @router.get(f"/{segment}/{{request_id}}/resolved-auth", response_model=ResolvedAuthResponse)
    def resolve_auth(request_id: str, store: RequestStore = Depends(get_store)):
        """Get the effective authentication of a request."""
        return store.resolve_auth(store.get_request(request_id))._asdict()

    @router.get(f"/{segment}/{{request_id}}/resolved-headers", response_model=list[HeaderEntry])
    def resolve_headers(request_id: str, store: RequestStore = Depends(get_store)):
        """Get the inherited and own header entries of a request, outermost first."""
        return store.resolve_headers(store.get_request(request_id))

    @router.get(f"/folders/{{folder_id}}/{segment}", response_model=list[response_schema])
    def list_requests_in_folder(folder_id: str, store: RequestStore = Depends(get_store)):
        """List every request inside a folder and its sub-folders."""
        return store.list_requests_in_folder_recursive(folder_id)

    return router


http_router = build_request_router(
    "http-requests",
    HTTP_REQUEST_KIND,
    HttpRequestUpsert,
    HttpRequestResponse,
    "http-requests",
)

grpc_router = build_request_router(
    "grpc-requests",
    GRPC_REQUEST_KIND,
    GrpcRequestUpsert,
    GrpcRequestResponse,
    "grpc-requests",
)
