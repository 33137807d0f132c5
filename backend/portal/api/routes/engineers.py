"""Engineer Routes: staffing lookups for the client portal."""

import logging

from fastapi import APIRouter, Depends

from portal.api.dependencies import get_storage
from portal.core.errors import OperationError
from portal.core.repository_protocols import Storage
from portal.schemas.client_portal import EngineerRead

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/engineers", tags=["engineers"])


@router.get("/available", response_model=list[EngineerRead])
async def list_available_engineers(storage: Storage = Depends(get_storage)):
    try:
        engineers = await storage.get_available_engineers()
    except Exception as e:
        logger.error(f"Failed to list available engineers: {e}", exc_info=True)
        raise OperationError("Failed to retrieve engineers") from e
    return [EngineerRead.model_validate(eng) for eng in engineers]
