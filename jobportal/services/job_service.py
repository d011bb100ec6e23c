"""Job catalog rules: posting, viewing, saving, applying, reporting."""
import logging
from datetime import date, datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.core.errors import AlreadyApplied, BadRequest, DeadlinePassed, NotFound
from jobportal.core.guards import ensure_owner, ensure_role
from jobportal.core.json_columns import encode_skills
from jobportal.core.security import CANDIDATE, EMPLOYER, Actor
from jobportal.core.uploads import LOGO_POLICY, check_upload, require_accepted, store
from jobportal.models.job import Job, JobApplication
from jobportal.repos import application_repo, job_repo
from jobportal.schemas.job import APPLICATION_STATUSES, ApplyRequest, JobCreate
from jobportal.services.notification_service import notify

logger = logging.getLogger(__name__)

SAVED = "Job saved"
UNSAVED = "Job unsaved"


def _today() -> date:
    return datetime.now(timezone.utc).date()


def _deadline_passed(deadline: date | None) -> bool:
    return deadline is not None and deadline < _today()


def list_active(db: Session) -> list[Job]:
    jobs = job_repo.list_active(db)
    if not jobs:
        raise NotFound("No active jobs found")
    return jobs


def get_by_id(db: Session, job_id: str) -> Job:
    """Fetch an active job and count the view."""
    job = job_repo.get_active_by_id(db, job_id)
    if not job:
        raise NotFound("Job not found")
    job_repo.increment_views(db, job_id)
    db.refresh(job)
    return job


def create(db: Session, actor: Actor, data: JobCreate, logo=None) -> Job:
    ensure_role(actor, EMPLOYER, "Only employers can post jobs")
    if data.salary_min is not None and data.salary_max is not None and data.salary_min > data.salary_max:
        raise BadRequest("Minimum salary cannot exceed maximum salary")
    if _deadline_passed(data.application_deadline):
        raise BadRequest("Application deadline cannot be in the past")

    logo_path = None
    if logo is not None:
        accepted = require_accepted(check_upload(logo, LOGO_POLICY))
        store(accepted)
        logo_path = accepted.path

    fields = data.model_dump(exclude={"skills"})
    fields["salary_type"] = data.salary_type or "Yearly"
    fields["skills"] = encode_skills(data.skills)
    fields["logo"] = logo_path
    job = job_repo.create(db, actor.id, fields)
    logger.info("Job %s posted by employer %s", job.id, actor.id)
    return job


def delete(db: Session, actor: Actor, job_id: str) -> None:
    ensure_role(actor, EMPLOYER, "Only employers can delete jobs")
    job = job_repo.get_owned(db, job_id, actor.id)
    if not job:
        raise NotFound("Job not found or you are not authorized to delete it")
    job_repo.delete(db, job)
    logger.info("Job %s deleted by employer %s", job_id, actor.id)


def toggle_save(db: Session, actor: Actor, job_id: str) -> str:
    """Save when absent, unsave when present. Returns the resulting state message."""
    ensure_role(actor, CANDIDATE, "Only candidates can save jobs")
    if not job_repo.get_by_id(db, job_id):
        raise NotFound("Job not found")
    if job_repo.get_saved(db, actor.id, job_id):
        job_repo.remove_saved(db, actor.id, job_id)
        return UNSAVED
    try:
        job_repo.add_saved(db, actor.id, job_id)
    except IntegrityError:
        # A concurrent request saved it first; the row exists either way.
        db.rollback()
    return SAVED


def unsave(db: Session, actor: Actor, job_id: str) -> None:
    if not job_repo.remove_saved(db, actor.id, job_id):
        raise NotFound("Saved job not found")


def _open_job_for(db: Session, actor: Actor, job_id: str) -> Job:
    ensure_role(actor, CANDIDATE, "Only candidates can apply for jobs")
    job = job_repo.get_active_by_id(db, job_id)
    if not job:
        raise NotFound("Job not found or not active")
    if _deadline_passed(job.application_deadline):
        raise DeadlinePassed()
    if application_repo.get_for_user_job(db, actor.id, job_id):
        raise AlreadyApplied()
    return job


def _insert_application(db: Session, actor: Actor, job_id: str, status: str, **details) -> JobApplication:
    try:
        return application_repo.create(db, actor.id, job_id, status, **details)
    except IntegrityError as e:
        db.rollback()
        raise AlreadyApplied() from e


def apply(db: Session, actor: Actor, job_id: str) -> JobApplication:
    job = _open_job_for(db, actor, job_id)
    application = _insert_application(db, actor, job_id, "Pending")
    logger.info("Candidate %s applied to job %s", actor.id, job_id)
    notify(db, actor.id, f"You have successfully applied to {job.title} at {job.company}")
    return application


def apply_detailed(db: Session, actor: Actor, data: ApplyRequest) -> JobApplication:
    ensure_role(actor, CANDIDATE, "Only candidates can apply for jobs")
    ensure_owner(actor, data.user_id, "Unauthorized: User ID mismatch")
    job = _open_job_for(db, actor, data.job_id)
    application = _insert_application(
        db,
        actor,
        data.job_id,
        "Applied",
        cover_letter=data.cover_letter,
        resume_link=data.resume_link,
        name=data.name,
        phone=data.phone,
        email=data.email,
    )
    logger.info("Candidate %s applied to job %s with details", actor.id, data.job_id)
    notify(db, actor.id, f"You have successfully applied to {job.title} at {job.company}", "success")
    return application


def withdraw(db: Session, actor: Actor, job_id: str) -> None:
    if not application_repo.delete_for_user_job(db, actor.id, job_id):
        raise NotFound("Application not found")
    logger.info("Candidate %s withdrew application for job %s", actor.id, job_id)


def report(db: Session, actor: Actor, job_id: str, reason: str | None, details: str | None = None) -> None:
    if not reason or not reason.strip():
        raise BadRequest("Reason is required")
    if not job_repo.get_by_id(db, job_id):
        raise NotFound("Job not found")
    job_repo.add_report(db, actor.id, job_id, reason.strip(), details or None)
    logger.info("Job %s reported by user %s", job_id, actor.id)


def set_application_status(db: Session, application_id: str, status: str | None) -> JobApplication:
    # Any authenticated caller may move an application to any listed status.
    if not status or status not in APPLICATION_STATUSES:
        raise BadRequest(f"Invalid status. Must be one of: {', '.join(APPLICATION_STATUSES)}")
    application = application_repo.update_status(db, application_id, status)
    if not application:
        raise NotFound("Application not found")
    return application


def list_for_poster(db: Session, actor: Actor, user_id: str) -> list[Job]:
    ensure_owner(actor, user_id)
    jobs = job_repo.list_by_poster(db, user_id)
    if not jobs:
        raise NotFound("No jobs found for this user")
    return jobs


def interaction_status(db: Session, actor: Actor, job_id: str) -> dict:
    return {
        "isSaved": job_repo.get_saved(db, actor.id, job_id) is not None,
        "hasApplied": application_repo.get_for_user_job(db, actor.id, job_id) is not None,
        "isReported": job_repo.has_report(db, actor.id, job_id),
    }


def list_saved(db: Session, actor: Actor, user_id: str) -> list[Job]:
    ensure_owner(actor, user_id)
    return job_repo.list_saved_jobs(db, user_id)


def list_applied(db: Session, actor: Actor, user_id: str) -> list[JobApplication]:
    ensure_owner(actor, user_id)
    return application_repo.list_for_user(db, user_id)


def list_applications_for_job(db: Session, actor: Actor, job_id: str) -> list[JobApplication]:
    if not job_repo.get_owned(db, job_id, actor.id):
        raise NotFound("Job not found or not authorized")
    applications = application_repo.list_for_job(db, job_id)
    if not applications:
        raise NotFound("No applications found for this job")
    return applications
