import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.schemas.notification import MessageCreate, MessageSent
from jobportal.services import messaging_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageSent, status_code=status.HTTP_201_CREATED)
def send_message(
    data: MessageCreate,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        message = messaging_service.send_message(db, actor, data.candidateId, data.message)
        return MessageSent(messageId=message.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Sending message from employer=%s failed: %s", actor.id, e)
        raise ServerError("Failed to send message", cause=e) from e
