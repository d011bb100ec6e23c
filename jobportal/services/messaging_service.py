import logging

from sqlalchemy.orm import Session

from jobportal.core.errors import BadRequest, NotFound
from jobportal.core.guards import ensure_role
from jobportal.core.security import CANDIDATE, EMPLOYER, Actor
from jobportal.models.notification import Message
from jobportal.repos import notification_repo, user_repo

logger = logging.getLogger(__name__)


def send_message(db: Session, actor: Actor, candidate_id: str | None, content: str | None) -> Message:
    ensure_role(actor, EMPLOYER, "Only employers can send messages")
    if not candidate_id or not content or not content.strip():
        raise BadRequest("Candidate ID and message are required")
    if not user_repo.get_with_role(db, candidate_id, CANDIDATE):
        raise NotFound("Candidate not found")
    message = notification_repo.create_message(db, actor.id, candidate_id, content.strip())
    logger.info("Message %s sent from employer %s to candidate %s", message.id, actor.id, candidate_id)
    return message
