"""Profile sub-collections (education, experience, certifications, languages).

Writes follow full-replace: every existing row for the user is deleted and the
supplied list is inserted. Callers commit.
"""
from sqlalchemy.orm import Session

from jobportal.core.security import generate_id
from jobportal.models.user import UserCertification, UserEducation, UserExperience, UserLanguage

ENTRY_MODELS = {
    "education": UserEducation,
    "experience": UserExperience,
    "certifications": UserCertification,
}


def replace_entries(db: Session, user_id: str, collection: str, entries: list[dict]) -> int:
    model = ENTRY_MODELS[collection]
    db.query(model).filter(model.user_id == user_id).delete(synchronize_session=False)
    for entry in entries:
        db.add(
            model(
                id=generate_id(),
                user_id=user_id,
                title=entry.get("title"),
                institution=entry.get("institution"),
                year=None if entry.get("year") is None else str(entry.get("year")),
            )
        )
    db.flush()
    return len(entries)


def replace_languages(db: Session, user_id: str, languages: list[str]) -> int:
    db.query(UserLanguage).filter(UserLanguage.user_id == user_id).delete(synchronize_session=False)
    for language in languages:
        db.add(UserLanguage(id=generate_id(), user_id=user_id, language=str(language)))
    db.flush()
    return len(languages)


def get_entries(db: Session, user_id: str, collection: str) -> list[dict]:
    model = ENTRY_MODELS[collection]
    rows = db.query(model).filter(model.user_id == user_id).all()
    return [{"title": r.title, "institution": r.institution, "year": r.year} for r in rows]


def get_languages(db: Session, user_id: str) -> list[str]:
    rows = db.query(UserLanguage).filter(UserLanguage.user_id == user_id).all()
    return [r.language for r in rows]
