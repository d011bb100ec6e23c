from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from jobportal.core.security import generate_id
from jobportal.models.company_profile import CompanyProfile
from jobportal.models.user import User

PROFILE_FIELDS = (
    "name",
    "email",
    "phone",
    "location",
    "linkedin",
    "github",
    "resume_link",
    "profile_pic",
    "skills",
    "hobbies",
    "availability",
    "preferred_job_type",
    "portfolio",
    "bio",
)


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email_or_phone(db: Session, email: str, phone: str) -> User | None:
    return db.query(User).filter(or_(func.lower(User.email) == email.lower(), User.phone == phone)).first()


def get_by_identifier(db: Session, identifier: str, role: str) -> User | None:
    """Role-scoped lookup by email (case-insensitive) or phone, used by login."""
    return (
        db.query(User)
        .filter(
            or_(func.lower(User.email) == identifier.lower(), User.phone == identifier),
            User.role == role,
        )
        .first()
    )


def get_with_role(db: Session, user_id: str, role: str) -> User | None:
    return db.query(User).filter(User.id == user_id, User.role == role).first()


def create(
    db: Session,
    *,
    name: str,
    email: str,
    phone: str,
    password_hash: str,
    role: str,
    location: str | None = None,
    company_name: str | None = None,
    industry: str | None = None,
    company_size: str | None = None,
    with_company_profile: bool = False,
) -> User:
    """Insert a user; employers get their company profile row in the same commit."""
    user = User(
        id=generate_id(),
        name=name,
        email=email,
        phone=phone,
        password_hash=password_hash,
        role=role,
        location=location,
        company_name=company_name,
        industry=industry,
        company_size=company_size,
    )
    db.add(user)
    if with_company_profile:
        db.add(
            CompanyProfile(
                id=user.id,
                company_name=company_name or name,
                industry=industry,
                company_size=company_size,
                email=email,
                contact_name=name,
                jobs="[]",
                reviews="[]",
            )
        )
    db.commit()
    db.refresh(user)
    return user


def update_profile_fields(db: Session, user_id: str, fields: dict) -> User | None:
    """Write the given profile columns. Role and credentials are never touched here."""
    user = get_by_id(db, user_id)
    if not user:
        return None
    for key, value in fields.items():
        if key in PROFILE_FIELDS:
            setattr(user, key, value)
    db.flush()
    return user


def list_by_role(db: Session, role: str) -> list[User]:
    return db.query(User).filter(User.role == role).order_by(User.created_at.desc()).all()
