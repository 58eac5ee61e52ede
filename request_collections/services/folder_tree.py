"""
Folder tree service for walking the containment chain of a request.

Provides functions for:
- Collecting a folder's ancestor chain, with cycle detection
- Resolving the effective authentication of a workspace or folder
- Resolving the effective header list of a workspace or folder

Authentication is overridden as a whole by the closest entity that sets a
type. Headers are concatenated from the workspace down to the innermost
folder so that a consumer applying the last entry per name gets the most
specific value.
"""

import logging
from typing import Any, NamedTuple, Optional

from ..exceptions import FolderCycleError
from ..models.folder import Folder
from ..models.workspace import Workspace
from .repository import Repository

logger = logging.getLogger(__name__)


class ResolvedAuth(NamedTuple):
    """Effective authentication and the id of the entity that supplied it."""
    authentication_type: Optional[str]
    authentication: dict[str, Any]
    owner_id: str


def get_folder_chain(repo: Repository, folder: Folder) -> list[Folder]:
    """
    Return ``folder`` followed by its ancestors, innermost first.

    Raises:
        ResourceNotFoundError: if a parent folder does not exist
        FolderCycleError: if the parent chain loops back on itself
    """
    chain = [folder]
    seen = {folder.id}
    current = folder

    while current.folder_id is not None:
        if current.folder_id in seen:
            logger.warning("Circular folder chain detected at %s", current.folder_id)
            raise FolderCycleError(current.folder_id)
        current = repo.find_one(Folder, "id", current.folder_id)
        seen.add(current.id)
        chain.append(current)

    return chain


def resolve_auth_for_workspace(workspace: Workspace) -> ResolvedAuth:
    return ResolvedAuth(
        workspace.authentication_type,
        dict(workspace.authentication or {}),
        workspace.id,
    )


def resolve_headers_for_workspace(workspace: Workspace) -> list[dict]:
    return [dict(h) for h in workspace.headers or []]


def resolve_auth_for_folder(repo: Repository, folder: Folder) -> ResolvedAuth:
    """Closest folder with an authentication type wins, else the workspace."""
    for current in get_folder_chain(repo, folder):
        if current.authentication_type:
            return ResolvedAuth(
                current.authentication_type,
                dict(current.authentication or {}),
                current.id,
            )

    workspace = repo.find_one(Workspace, "id", folder.workspace_id)
    return resolve_auth_for_workspace(workspace)


def resolve_headers_for_folder(repo: Repository, folder: Folder) -> list[dict]:
    """Workspace headers, then every folder's own headers from outermost to ``folder``."""
    chain = get_folder_chain(repo, folder)
    workspace = repo.find_one(Workspace, "id", folder.workspace_id)

    headers = resolve_headers_for_workspace(workspace)
    for current in reversed(chain):
        headers.extend(dict(h) for h in current.headers or [])
    return headers


def detect_circular_reference(repo: Repository, folder_id: str, new_parent_id: str) -> bool:
    """
    Detect if moving a folder under a new parent would create a circular reference.
    """
    if new_parent_id == folder_id:
        return True

    current_id: Optional[str] = new_parent_id
    seen: set[str] = set()

    while current_id is not None and current_id not in seen:
        seen.add(current_id)
        found = repo.find_many(Folder, "id", current_id, limit=1)
        if not found:
            return False
        folder = found[0]
        if folder.folder_id == folder_id:
            return True
        current_id = folder.folder_id

    return current_id is not None
