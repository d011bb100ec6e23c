from sqlalchemy.orm import Session, joinedload

from jobportal.core.security import generate_id
from jobportal.models.job import Job, JobApplication


def create(
    db: Session,
    user_id: str,
    job_id: str,
    status: str,
    *,
    cover_letter: str | None = None,
    resume_link: str | None = None,
    name: str | None = None,
    phone: str | None = None,
    email: str | None = None,
) -> JobApplication:
    application = JobApplication(
        id=generate_id(),
        user_id=user_id,
        job_id=job_id,
        status=status,
        cover_letter=cover_letter,
        resume_link=resume_link,
        name=name,
        phone=phone,
        email=email,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> JobApplication | None:
    return db.query(JobApplication).filter(JobApplication.id == application_id).first()


def get_for_user_job(db: Session, user_id: str, job_id: str) -> JobApplication | None:
    return (
        db.query(JobApplication)
        .filter(JobApplication.user_id == user_id, JobApplication.job_id == job_id)
        .first()
    )


def update_status(db: Session, application_id: str, status: str) -> JobApplication | None:
    application = get_by_id(db, application_id)
    if not application:
        return None
    application.status = status
    db.commit()
    db.refresh(application)
    return application


def delete_for_user_job(db: Session, user_id: str, job_id: str) -> bool:
    deleted = (
        db.query(JobApplication)
        .filter(JobApplication.user_id == user_id, JobApplication.job_id == job_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def list_for_job(db: Session, job_id: str) -> list[JobApplication]:
    return (
        db.query(JobApplication)
        .filter(JobApplication.job_id == job_id)
        .order_by(JobApplication.applied_at.desc())
        .all()
    )


def list_for_user(db: Session, user_id: str) -> list[JobApplication]:
    """Applications with their job loaded, newest first."""
    return (
        db.query(JobApplication)
        .options(joinedload(JobApplication.job))
        .join(Job, Job.id == JobApplication.job_id)
        .filter(JobApplication.user_id == user_id)
        .order_by(JobApplication.applied_at.desc())
        .all()
    )
