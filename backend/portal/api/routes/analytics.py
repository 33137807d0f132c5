"""Analytics Routes: page view and event tracking, dashboard summary."""

import logging

from fastapi import APIRouter, Depends

from portal.api.dependencies import get_storage
from portal.core.errors import OperationError
from portal.core.repository_protocols import Storage
from portal.schemas.analytics import AnalyticsDashboard, EventCreate, PageViewCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.post("/pageview")
async def track_page_view(
    body: PageViewCreate, storage: Storage = Depends(get_storage),
):
    try:
        page_view = await storage.create_page_view(body)
    except Exception as e:
        logger.error(f"Failed to track page view: {e}", exc_info=True)
        raise OperationError("Failed to track page view") from e
    return {"success": True, "id": page_view.id}


@router.post("/event")
async def track_event(
    body: EventCreate, storage: Storage = Depends(get_storage),
):
    try:
        event = await storage.create_event(body)
    except Exception as e:
        logger.error(f"Failed to track event: {e}", exc_info=True)
        raise OperationError("Failed to track event") from e
    return {"success": True, "id": event.id}


@router.get("/dashboard", response_model=AnalyticsDashboard)
async def get_dashboard(storage: Storage = Depends(get_storage)):
    """Aggregate traffic and conversion numbers."""
    try:
        return await storage.get_analytics_dashboard()
    except Exception as e:
        logger.error(f"Failed to build analytics dashboard: {e}", exc_info=True)
        raise OperationError("Failed to retrieve analytics data") from e
