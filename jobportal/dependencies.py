import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobportal.core.errors import InvalidToken, Unauthenticated
from jobportal.core.guards import ensure_role
from jobportal.core.security import Actor, decode_access_token

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Actor:
    """Resolve the bearer token to an Actor. The token alone is trusted; no DB lookup."""
    if not credentials or not credentials.credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise Unauthenticated("Access denied. No token provided.")
    actor = decode_access_token(credentials.credentials)
    if actor is None:
        logger.info("Auth failed: invalid or expired token")
        raise InvalidToken()
    return actor


def require_role(role: str):
    """Dependency factory: the caller must hold ``role``."""

    def _check(actor: Actor = Depends(get_current_actor)) -> Actor:
        ensure_role(actor, role, f"Only {role}s can perform this action")
        return actor

    return _check
