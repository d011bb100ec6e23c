import logging

from sqlalchemy.orm import Session

from jobportal.core.errors import BadRequest, NotFound
from jobportal.core.guards import ensure_owner, ensure_role
from jobportal.core.security import EMPLOYER, Actor
from jobportal.models.notification import Notification
from jobportal.repos import notification_repo, user_repo

logger = logging.getLogger(__name__)


def notify(db: Session, user_id: str, message: str, type: str = "info") -> Notification | None:
    """
    Best-effort notification for domain events. The triggering action has
    already been committed; a failure here is logged and swallowed.
    """
    try:
        notification = notification_repo.create(db, user_id, message, type)
        logger.info("Notification created for user %s: %s", user_id, message)
        return notification
    except Exception as e:
        db.rollback()
        logger.exception("Error creating notification for user=%s: %s", user_id, e)
        return None


def create_notification(db: Session, actor: Actor, user_id: str, message: str, type: str | None = "info") -> Notification:
    """Manual notification sent by an employer."""
    ensure_role(actor, EMPLOYER, "Only employers can create notifications")
    if not message or not message.strip():
        raise BadRequest("Message is required")
    if not user_repo.get_by_id(db, user_id):
        raise NotFound("User not found")
    return notification_repo.create(db, user_id, message.strip(), type or "info")


def list_notifications(db: Session, actor: Actor, user_id: str) -> list[Notification]:
    ensure_owner(actor, user_id)
    return notification_repo.list_for_user(db, user_id)


def unread_count(db: Session, actor: Actor, user_id: str) -> int:
    ensure_owner(actor, user_id)
    return notification_repo.count_unread(db, user_id)


def mark_read(db: Session, actor: Actor, notification_id: str) -> None:
    if not notification_repo.mark_read(db, notification_id, actor.id):
        logger.info("Notification %s not found or not owned by user %s", notification_id, actor.id)
        raise NotFound("Notification not found or not owned by user")


def delete_notification(db: Session, actor: Actor, notification_id: str) -> None:
    if not notification_repo.delete_owned(db, notification_id, actor.id):
        raise NotFound("Notification not found or not owned by user")
