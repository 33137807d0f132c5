"""Request Dependencies: storage handle and caller identity for route handlers.

Invariants:
    - Storage comes from app.state (set once by create_app/lifespan), never a global
    - AuthContext is resolved per request

Design Decisions:
    - Both are plain FastAPI dependencies so tests can use dependency_overrides
"""

from fastapi import Depends, Request

from portal.config import Settings, get_settings
from portal.core.auth_context import AuthContext
from portal.core.domain_types import ClientId
from portal.core.repository_protocols import Storage


def get_storage(request: Request) -> Storage:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage


def get_auth_context(settings: Settings = Depends(get_settings)) -> AuthContext:
    """Stub identity: every caller is the configured placeholder client."""
    return AuthContext(client_id=ClientId(settings.placeholder_client_id))
