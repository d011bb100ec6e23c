import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobportal.core.errors import BadRequest, ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.schemas.job import (
    ApplicationCreated,
    JobCreate,
    JobCreated,
    JobInteractionStatus,
    JobResponse,
    ReportRequest,
)
from jobportal.services import job_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_form(
    title: str = Form(""),
    job_type: str = Form(""),
    description: str = Form(""),
    company: str = Form(""),
    salary_min: str | None = Form(None),
    salary_max: str | None = Form(None),
    salary_type: str | None = Form(None),
    location: str | None = Form(None),
    experience: str | None = Form(None),
    work_location: str | None = Form(None),
    application_deadline: str | None = Form(None),
    skills: str | None = Form(None),
    company_size: str | None = Form(None),
    benefits: str | None = Form(None),
    category: str | None = Form(None),
    requirements: str | None = Form(None),
    apply_url: str | None = Form(None),
) -> JobCreate:
    """Collect the multipart fields of a job posting into a JobCreate."""
    params = dict(locals())
    fields = {name: value for name, value in params.items() if value is not None}
    try:
        return JobCreate(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = error["loc"][0] if error.get("loc") else "input"
        raise BadRequest(f"{field}: {error['msg'].removeprefix('Value error, ')}") from e


@router.get("", response_model=list[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    try:
        return job_service.list_active(db)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Listing jobs failed: %s", e)
        raise ServerError("Failed to fetch jobs", cause=e) from e


@router.post("", response_model=JobCreated, status_code=status.HTTP_201_CREATED)
def create_job(
    data: JobCreate = Depends(_job_form),
    logo: UploadFile | None = File(None),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        job = job_service.create(db, actor, data, logo=logo)
        return JobCreated(jobId=job.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Job creation failed for employer=%s: %s", actor.id, e)
        raise ServerError("Failed to post job", cause=e) from e


@router.get("/user/{user_id}", response_model=list[JobResponse])
def list_jobs_by_poster(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return job_service.list_for_poster(db, actor, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Listing jobs for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to fetch jobs", cause=e) from e


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return job_service.get_by_id(db, job_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching job=%s failed: %s", job_id, e)
        raise ServerError("Failed to fetch job", cause=e) from e


@router.get("/{job_id}/status", response_model=JobInteractionStatus)
def job_status(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return job_service.interaction_status(db, actor, job_id)
    except Exception as e:
        logger.exception("Fetching status of job=%s failed: %s", job_id, e)
        raise ServerError("Failed to fetch job status", cause=e) from e


@router.post("/{job_id}/save")
def toggle_save(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return {"message": job_service.toggle_save(db, actor, job_id)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Saving job=%s failed: %s", job_id, e)
        raise ServerError("Failed to save job", cause=e) from e


@router.delete("/{job_id}/save")
def unsave(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        job_service.unsave(db, actor, job_id)
        return {"message": "Job removed from saved list"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unsaving job=%s failed: %s", job_id, e)
        raise ServerError("Failed to unsave job", cause=e) from e


@router.post("/{job_id}/apply", response_model=ApplicationCreated, status_code=status.HTTP_201_CREATED)
def apply(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        application = job_service.apply(db, actor, job_id)
        return ApplicationCreated(applicationId=application.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Applying to job=%s failed for user=%s: %s", job_id, actor.id, e)
        raise ServerError("Failed to apply for job", cause=e) from e


@router.post("/{job_id}/report", status_code=status.HTTP_201_CREATED)
def report(
    job_id: str,
    data: ReportRequest,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        job_service.report(db, actor, job_id, data.reason, data.details)
        return {"message": "Job reported successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Reporting job=%s failed: %s", job_id, e)
        raise ServerError("Failed to report job", cause=e) from e


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        job_service.delete(db, actor, job_id)
        return {"message": "Job deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Deleting job=%s failed: %s", job_id, e)
        raise ServerError("Failed to delete job", cause=e) from e
