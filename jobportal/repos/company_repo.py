from sqlalchemy.orm import Session

from jobportal.models.company_profile import CompanyProfile

EDITABLE_FIELDS = (
    "company_name",
    "logo",
    "about",
    "industry",
    "headquarters",
    "company_size",
    "founded",
    "website",
    "email",
    "contact_name",
)


def get_all(db: Session) -> list[CompanyProfile]:
    return db.query(CompanyProfile).order_by(CompanyProfile.company_name).all()


def get_by_id(db: Session, profile_id: str) -> CompanyProfile | None:
    return db.query(CompanyProfile).filter(CompanyProfile.id == profile_id).first()


def update(db: Session, profile_id: str, fields: dict) -> CompanyProfile | None:
    profile = get_by_id(db, profile_id)
    if not profile:
        return None
    for key in EDITABLE_FIELDS:
        if key in fields:
            setattr(profile, key, fields[key])
    db.commit()
    db.refresh(profile)
    return profile
