from sqlalchemy.orm import Session

from jobportal.core.security import generate_id
from jobportal.models.notification import Message, Notification


def create(db: Session, user_id: str, message: str, type: str = "info") -> Notification:
    notification = Notification(id=generate_id(), user_id=user_id, message=message, type=type or "info")
    db.add(notification)
    db.commit()
    db.refresh(notification)
    return notification


def list_for_user(db: Session, user_id: str) -> list[Notification]:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc())
        .all()
    )


def count_unread(db: Session, user_id: str) -> int:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.read.is_(False))
        .count()
    )


def mark_read(db: Session, notification_id: str, user_id: str) -> bool:
    """Flip read for a notification owned by user_id. False if no such owned row."""
    updated = (
        db.query(Notification)
        .filter(Notification.id == notification_id, Notification.user_id == user_id)
        .update({Notification.read: True}, synchronize_session=False)
    )
    db.commit()
    return updated > 0


def delete_owned(db: Session, notification_id: str, user_id: str) -> bool:
    deleted = (
        db.query(Notification)
        .filter(Notification.id == notification_id, Notification.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def create_message(db: Session, sender_id: str, receiver_id: str, content: str) -> Message:
    message = Message(id=generate_id(), sender_id=sender_id, receiver_id=receiver_id, content=content)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message
