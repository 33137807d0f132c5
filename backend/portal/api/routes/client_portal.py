"""Client Portal Routes: client registration and the caller's projects.

Invariants:
    - The acting client always comes from AuthContext, never from the body
    - New projects always start in "planning"

Design Decisions:
    - ProjectRequest drops any clientId/status the body carries; ProjectCreate
      is then built from it plus the identity and lifecycle start state
"""

import logging

from fastapi import APIRouter, Depends

from portal.api.dependencies import get_auth_context, get_storage
from portal.core.auth_context import AuthContext
from portal.core.domain_types import ProjectStatus
from portal.core.errors import OperationError
from portal.core.repository_protocols import Storage
from portal.schemas.client_portal import (
    ClientCreate, ClientRead, ProjectCreate, ProjectRead, ProjectRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/client", tags=["client-portal"])


@router.post("")
async def create_client(
    body: ClientCreate, storage: Storage = Depends(get_storage),
):
    try:
        client = await storage.create_client(body)
    except Exception as e:
        logger.error(f"Failed to create client: {e}", exc_info=True)
        raise OperationError("Failed to create client") from e
    return {"success": True, "client": ClientRead.model_validate(client)}


@router.get("/projects", response_model=list[ProjectRead])
async def list_client_projects(
    auth: AuthContext = Depends(get_auth_context),
    storage: Storage = Depends(get_storage),
):
    """Projects owned by the calling client."""
    try:
        projects = await storage.get_client_projects(auth.client_id)
    except Exception as e:
        logger.error(
            f"Failed to list projects: {e}",
            extra={"client_id": auth.client_id}, exc_info=True,
        )
        raise OperationError("Failed to retrieve projects") from e
    return [ProjectRead.model_validate(p) for p in projects]


@router.post("/projects")
async def create_client_project(
    body: ProjectRequest,
    auth: AuthContext = Depends(get_auth_context),
    storage: Storage = Depends(get_storage),
):
    """Open a new project for the calling client."""
    data = ProjectCreate(
        **body.model_dump(),
        client_id=auth.client_id,
        status=ProjectStatus.PLANNING.value,
    )
    try:
        project = await storage.create_project(data)
    except Exception as e:
        logger.error(
            f"Failed to create project: {e}",
            extra={"client_id": auth.client_id}, exc_info=True,
        )
        raise OperationError("Failed to create project") from e
    return {"success": True, "project": ProjectRead.model_validate(project)}
