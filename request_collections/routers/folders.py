"""
Folder management API routes.

Provides CRUD operations for folders to organize requests.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import FolderCycleError, WorkspaceMismatchError
from ..models.folder import Folder
from ..models.workspace import Workspace
from ..schemas.folder import FolderUpsert, FolderResponse
from ..schemas.request import ResolvedAuthResponse
from ..schemas.header import HeaderEntry
from ..services.folder_tree import (
    detect_circular_reference,
    resolve_auth_for_folder,
    resolve_headers_for_folder,
)
from ..services.repository import Repository, UpdateSource
from ..services.sort_priority import sort_by_priority
from .requests import get_update_source


router = APIRouter(prefix="/api/folders", tags=["folders"])


@router.get("", response_model=list[FolderResponse])
def list_folders(workspace_id: str, db: Session = Depends(get_db)):
    """List the folders of a workspace ordered by sort priority."""
    return sort_by_priority(Repository(db).find_many(Folder, "workspace_id", workspace_id))


@router.post("", response_model=FolderResponse)
def upsert_folder(
    folder_data: FolderUpsert,
    db: Session = Depends(get_db),
    source: UpdateSource = Depends(get_update_source),
):
    """
    Create a folder (empty id) or replace an existing one.

    Raises:
        ResourceNotFoundError: 404 if the workspace or parent folder does not exist
        FolderCycleError: 409 if the new parent would create a circular reference
        WorkspaceMismatchError: 409 if the parent folder belongs to another
            workspace, or an existing folder would change workspace
    """
    repo = Repository(db)
    repo.find_one(Workspace, "id", folder_data.workspace_id)

    if folder_data.id:
        existing = repo.find_many(Folder, "id", folder_data.id, limit=1)
        if existing and existing[0].workspace_id != folder_data.workspace_id:
            raise WorkspaceMismatchError("Folder", folder_data.id, folder_data.workspace_id)

    if folder_data.folder_id is not None:
        parent = repo.find_one(Folder, "id", folder_data.folder_id)
        if parent.workspace_id != folder_data.workspace_id:
            raise WorkspaceMismatchError("Folder", parent.id, folder_data.workspace_id)
        if folder_data.id and detect_circular_reference(
            repo, folder_data.id, folder_data.folder_id
        ):
            raise FolderCycleError(folder_data.id)

    return repo.upsert(Folder(**folder_data.model_dump()), source)


@router.get("/{folder_id}", response_model=FolderResponse)
def get_folder(folder_id: str, db: Session = Depends(get_db)):
    """Get a single folder by ID."""
    return Repository(db).find_one(Folder, "id", folder_id)


@router.get("/{folder_id}/resolved-auth", response_model=ResolvedAuthResponse)
def resolve_folder_auth(folder_id: str, db: Session = Depends(get_db)):
    """Get the effective authentication of a folder."""
    repo = Repository(db)
    return resolve_auth_for_folder(repo, repo.find_one(Folder, "id", folder_id))._asdict()


@router.get("/{folder_id}/resolved-headers", response_model=list[HeaderEntry])
def resolve_folder_headers(folder_id: str, db: Session = Depends(get_db)):
    """Get the inherited and own header entries of a folder, outermost first."""
    repo = Repository(db)
    return resolve_headers_for_folder(repo, repo.find_one(Folder, "id", folder_id))


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_folder(
    folder_id: str,
    db: Session = Depends(get_db),
    source: UpdateSource = Depends(get_update_source),
):
    """Delete a folder by ID. Cascades to all sub-folders and requests."""
    repo = Repository(db)
    repo.delete(repo.find_one(Folder, "id", folder_id), source)
    return None
