import json
import logging

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.core.errors import BadRequest, Conflict, NotFound
from jobportal.core.guards import ensure_owner
from jobportal.core.security import CANDIDATE, Actor
from jobportal.core.uploads import PROFILE_PIC_POLICY, RESUME_POLICY, check_upload, require_accepted, store
from jobportal.models.user import User
from jobportal.repos import profile_repo, user_repo
from jobportal.schemas.auth import EMAIL_RE, normalize_email
from jobportal.schemas.profile import ProfileEntry, ProfileUpdateForm

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "phone", "location")
OPTIONAL_FIELDS = (
    "linkedin",
    "github",
    "skills",
    "hobbies",
    "availability",
    "preferred_job_type",
    "portfolio",
    "bio",
)
ENTRY_COLLECTIONS = ("education", "experience", "certifications")


def _profile_dict(db: Session, user: User) -> dict:
    return {
        "user_id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "role": user.role,
        "location": user.location,
        "linkedin": user.linkedin,
        "github": user.github,
        "resume_link": user.resume_link,
        "profile_pic": user.profile_pic,
        "skills": user.skills,
        "hobbies": user.hobbies,
        "availability": user.availability,
        "preferred_job_type": user.preferred_job_type,
        "portfolio": user.portfolio,
        "bio": user.bio,
        "education": profile_repo.get_entries(db, user.id, "education"),
        "experience": profile_repo.get_entries(db, user.id, "experience"),
        "certifications": profile_repo.get_entries(db, user.id, "certifications"),
        "languages": profile_repo.get_languages(db, user.id),
    }


def _parse_collection(raw: str, name: str) -> list:
    if not raw.strip():
        return []
    try:
        items = json.loads(raw)
    except ValueError as e:
        raise BadRequest(f"{name} must be a JSON list") from e
    if not isinstance(items, list):
        raise BadRequest(f"{name} must be a JSON list")
    if name == "languages":
        if not all(isinstance(item, str) for item in items):
            raise BadRequest("languages must be a list of strings")
        return [item.strip() for item in items if item.strip()]
    if not all(isinstance(item, dict) for item in items):
        raise BadRequest(f"{name} entries must be objects")
    try:
        return [ProfileEntry.model_validate(item).model_dump() for item in items]
    except ValidationError as e:
        error = e.errors()[0]
        field = error["loc"][0] if error.get("loc") else "entry"
        raise BadRequest(f"{name} {field}: {error['msg']}") from e


def get_profile(db: Session, actor: Actor, user_id: str) -> dict:
    ensure_owner(actor, user_id)
    user = user_repo.get_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")
    return _profile_dict(db, user)


def get_candidate_summary(db: Session, candidate_id: str) -> User:
    user = user_repo.get_with_role(db, candidate_id, CANDIDATE)
    if not user:
        raise NotFound("Candidate not found")
    return user


def update_profile(
    db: Session,
    actor: Actor,
    user_id: str,
    form: ProfileUpdateForm,
    resume=None,
    profile_pic=None,
) -> dict:
    """
    Update scalar fields, uploaded documents and sub-collections in one go.
    Input and files are fully validated before the first write.
    """
    ensure_owner(actor, user_id)
    required = {}
    for name in REQUIRED_FIELDS:
        value = (getattr(form, name) or "").strip()
        if not value:
            raise BadRequest(f"{name.capitalize()} is required")
        required[name] = value
    if not EMAIL_RE.match(required["email"]):
        raise BadRequest("Valid email is required")
    required["email"] = normalize_email(required["email"])

    collections = {}
    for name in (*ENTRY_COLLECTIONS, "languages"):
        raw = getattr(form, name)
        if raw is not None:
            collections[name] = _parse_collection(raw, name)

    uploads = {}
    if resume is not None:
        uploads["resume_link"] = require_accepted(check_upload(resume, RESUME_POLICY))
    if profile_pic is not None:
        uploads["profile_pic"] = require_accepted(check_upload(profile_pic, PROFILE_PIC_POLICY))

    user = user_repo.get_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")

    fields = dict(required)
    for name in OPTIONAL_FIELDS:
        value = getattr(form, name)
        fields[name] = value.strip() if value and value.strip() else getattr(user, name)
    for column, accepted in uploads.items():
        store(accepted)
        fields[column] = accepted.path

    try:
        user_repo.update_profile_fields(db, user_id, fields)
        for name, items in collections.items():
            if name == "languages":
                profile_repo.replace_languages(db, user_id, items)
            else:
                profile_repo.replace_entries(db, user_id, name, items)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict("Email or phone already exists") from e

    logger.info("Profile updated for user %s (replaced: %s)", user_id, ", ".join(collections) or "none")
    db.refresh(user)
    return _profile_dict(db, user)


def upload_resume(db: Session, actor: Actor, user_id: str, resume) -> dict:
    ensure_owner(actor, user_id)
    if resume is None:
        raise BadRequest("No resume file uploaded")
    accepted = require_accepted(check_upload(resume, RESUME_POLICY))
    user = user_repo.get_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")
    store(accepted)
    user_repo.update_profile_fields(db, user_id, {"resume_link": accepted.path})
    db.commit()
    db.refresh(user)
    logger.info("Resume uploaded for user %s", user_id)
    return _profile_dict(db, user)
