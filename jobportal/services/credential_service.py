"""Signup and role-scoped login for candidates and employers."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.core.errors import AccountNotFound, Conflict, InvalidCredentials
from jobportal.core.security import CANDIDATE, EMPLOYER, create_access_token, hash_password, verify_password
from jobportal.models.user import User
from jobportal.repos import user_repo
from jobportal.schemas.auth import CandidateSignup, EmployerSignup

logger = logging.getLogger(__name__)


def _ensure_unique(db: Session, email: str, phone: str) -> None:
    existing = user_repo.get_by_email_or_phone(db, email, phone)
    if existing:
        field = "email" if existing.email.lower() == email.lower() else "phone"
        raise Conflict(f"User with this {field} already exists")


def _insert(db: Session, **fields) -> User:
    # The pre-check races with concurrent signups; the unique index decides.
    try:
        return user_repo.create(db, **fields)
    except IntegrityError as e:
        db.rollback()
        logger.info("Signup rejected by unique constraint: %s", e.orig)
        raise Conflict("Email or phone already exists") from e


def register_candidate(db: Session, data: CandidateSignup) -> User:
    _ensure_unique(db, data.email, data.phone)
    user = _insert(
        db,
        name=data.name,
        email=data.email,
        phone=data.phone,
        location=data.location,
        password_hash=hash_password(data.password),
        role=CANDIDATE,
    )
    logger.info("Candidate registered: %s", user.id)
    return user


def register_employer(db: Session, data: EmployerSignup) -> User:
    _ensure_unique(db, data.email, data.phone)
    user = _insert(
        db,
        name=data.name,
        email=data.email,
        phone=data.phone,
        password_hash=hash_password(data.password),
        role=EMPLOYER,
        company_name=data.company_name,
        industry=data.industry,
        company_size=data.company_size,
        with_company_profile=True,
    )
    logger.info("Employer registered: %s", user.id)
    return user


def login(db: Session, identifier: str, password: str, role: str) -> tuple[User, str]:
    """Authenticate within one role. Returns (user, token)."""
    user = user_repo.get_by_identifier(db, identifier, role)
    if not user:
        logger.info("Login failed: no %s account for identifier", role)
        raise AccountNotFound(f"No {role} account found with this email or phone")
    if not verify_password(password, user.password_hash):
        logger.info("Login failed: wrong password for user=%s", user.id)
        raise InvalidCredentials("Incorrect password")
    token = create_access_token(user.id, user.email, user.phone, user.role)
    logger.info("User logged in: %s (%s)", user.id, role)
    return user, token


def list_employers(db: Session) -> list[User]:
    return user_repo.list_by_role(db, EMPLOYER)
