import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.schemas.notification import (
    NotificationCreate,
    NotificationCreated,
    NotificationList,
    NotificationResponse,
    UnreadCount,
)
from jobportal.services import notification_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["notifications"])


@router.get("/notifications/{user_id}", response_model=NotificationList)
def list_notifications(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        notifications = notification_service.list_notifications(db, actor, user_id)
        return NotificationList(notifications=[NotificationResponse.model_validate(n) for n in notifications])
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching notifications for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to fetch notifications", cause=e) from e


@router.get("/notifications/{user_id}/unread", response_model=UnreadCount)
def unread_count(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return UnreadCount(unreadCount=notification_service.unread_count(db, actor, user_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Counting unread notifications for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to count notifications", cause=e) from e


@router.post("/notifications", response_model=NotificationCreated, status_code=status.HTTP_201_CREATED)
def create_notification(
    data: NotificationCreate,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        notification = notification_service.create_notification(db, actor, data.user_id, data.message, data.type)
        return NotificationCreated(notificationId=notification.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Creating notification for user=%s failed: %s", data.user_id, e)
        raise ServerError("Failed to create notification", cause=e) from e


@router.put("/notifications/{notification_id}/read")
def mark_read(
    notification_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        notification_service.mark_read(db, actor, notification_id)
        return {"message": "Notification marked as read"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Marking notification=%s read failed: %s", notification_id, e)
        raise ServerError("Failed to update notification", cause=e) from e


@router.delete("/notifications/{notification_id}")
def delete_notification(
    notification_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        notification_service.delete_notification(db, actor, notification_id)
        return {"message": "Notification deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Deleting notification=%s failed: %s", notification_id, e)
        raise ServerError("Failed to delete notification", cause=e) from e

