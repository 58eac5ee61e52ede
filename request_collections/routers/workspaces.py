"""
Workspace management API routes.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.workspace import Workspace
from ..schemas.workspace import WorkspaceUpsert, WorkspaceResponse
from ..services.repository import Repository, UpdateSource
from .requests import get_update_source


router = APIRouter(prefix="/api/workspaces", tags=["workspaces"])


@router.get("", response_model=list[WorkspaceResponse])
def list_workspaces(db: Session = Depends(get_db)):
    """List all workspaces."""
    return db.query(Workspace).order_by(Workspace.created_at, Workspace.id).all()


@router.post("", response_model=WorkspaceResponse)
def upsert_workspace(
    workspace_data: WorkspaceUpsert,
    db: Session = Depends(get_db),
    source: UpdateSource = Depends(get_update_source),
):
    """Create a workspace (empty id) or replace an existing one."""
    workspace = Workspace(**workspace_data.model_dump())
    return Repository(db).upsert(workspace, source)


@router.get("/{workspace_id}", response_model=WorkspaceResponse)
def get_workspace(workspace_id: str, db: Session = Depends(get_db)):
    """
    Get a single workspace by ID.

    Raises:
        ResourceNotFoundError: 404 if workspace not found
    """
    return Repository(db).find_one(Workspace, "id", workspace_id)


@router.delete("/{workspace_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workspace(
    workspace_id: str,
    db: Session = Depends(get_db),
    source: UpdateSource = Depends(get_update_source),
):
    """Delete a workspace. Cascades to its folders, requests and their records."""
    repo = Repository(db)
    repo.delete(repo.find_one(Workspace, "id", workspace_id), source)
    return None
