"""Authentication Context: request-scoped identity for client portal routes.

Invariants:
    - Routes never hardcode a client id; they read it from AuthContext

Design Decisions:
    - Frozen dataclass: identity cannot be mutated mid-request
    - Currently backed by a stub (Settings.placeholder_client_id); swapping in
      real session auth only changes api/dependencies.get_auth_context
"""

from dataclasses import dataclass

from portal.core.domain_types import ClientId


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller as far as the portal is concerned."""
    client_id: ClientId
