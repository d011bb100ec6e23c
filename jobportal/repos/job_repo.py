import logging

from sqlalchemy.orm import Session

from jobportal.core.security import generate_id
from jobportal.models.job import JOB_STATUS_ACTIVE, Job, JobReport, SavedJob

logger = logging.getLogger(__name__)


def create(db: Session, posted_by: str, fields: dict) -> Job:
    job = Job(
        id=generate_id(),
        posted_by=posted_by,
        status=JOB_STATUS_ACTIVE,
        views=0,
        **fields,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()


def get_active_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id, Job.status == JOB_STATUS_ACTIVE).first()


def get_owned(db: Session, job_id: str, user_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id, Job.posted_by == user_id).first()


def list_active(db: Session) -> list[Job]:
    return (
        db.query(Job)
        .filter(Job.status == JOB_STATUS_ACTIVE)
        .order_by(Job.date_posted.desc())
        .all()
    )


def list_by_poster(db: Session, user_id: str) -> list[Job]:
    return db.query(Job).filter(Job.posted_by == user_id).order_by(Job.date_posted.desc()).all()


def increment_views(db: Session, job_id: str) -> int:
    """Atomic views = views + 1 in SQL. Returns affected row count."""
    updated = (
        db.query(Job)
        .filter(Job.id == job_id)
        .update({Job.views: Job.views + 1}, synchronize_session=False)
    )
    db.commit()
    return updated


def delete(db: Session, job: Job) -> None:
    db.delete(job)
    db.commit()


def get_saved(db: Session, user_id: str, job_id: str) -> SavedJob | None:
    return db.query(SavedJob).filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id).first()


def add_saved(db: Session, user_id: str, job_id: str) -> SavedJob:
    saved = SavedJob(id=generate_id(), user_id=user_id, job_id=job_id)
    db.add(saved)
    db.commit()
    return saved


def remove_saved(db: Session, user_id: str, job_id: str) -> bool:
    deleted = (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def list_saved_jobs(db: Session, user_id: str) -> list[Job]:
    return (
        db.query(Job)
        .join(SavedJob, SavedJob.job_id == Job.id)
        .filter(SavedJob.user_id == user_id)
        .order_by(SavedJob.saved_at.desc())
        .all()
    )


def add_report(db: Session, user_id: str, job_id: str, reason: str, details: str | None = None) -> JobReport:
    report = JobReport(id=generate_id(), user_id=user_id, job_id=job_id, reason=reason, details=details)
    db.add(report)
    db.commit()
    db.refresh(report)
    return report


def has_report(db: Session, user_id: str, job_id: str) -> bool:
    return db.query(JobReport).filter(JobReport.user_id == user_id, JobReport.job_id == job_id).first() is not None
