"""Role and ownership checks applied by services before any mutation."""
from jobportal.core.errors import Forbidden
from jobportal.core.security import Actor


def ensure_role(actor: Actor, role: str, message: str | None = None) -> None:
    if actor.role != role:
        raise Forbidden(message or f"Only {role}s can perform this action")


def ensure_owner(actor: Actor, owner_id: str | None, message: str | None = None) -> None:
    if owner_id is None or str(owner_id) != str(actor.id):
        raise Forbidden(message or "Unauthorized")
