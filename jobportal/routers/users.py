import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.models.job import JobApplication
from jobportal.schemas.job import AppliedJobResponse, JobResponse
from jobportal.schemas.profile import CandidateSummary, ProfileResponse, ProfileUpdated, ProfileUpdateForm
from jobportal.services import job_service, profile_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


def _profile_form(
    name: str | None = Form(None),
    email: str | None = Form(None),
    phone: str | None = Form(None),
    location: str | None = Form(None),
    linkedin: str | None = Form(None),
    github: str | None = Form(None),
    skills: str | None = Form(None),
    hobbies: str | None = Form(None),
    availability: str | None = Form(None),
    preferred_job_type: str | None = Form(None),
    portfolio: str | None = Form(None),
    bio: str | None = Form(None),
    education: str | None = Form(None),
    experience: str | None = Form(None),
    certifications: str | None = Form(None),
    languages: str | None = Form(None),
) -> ProfileUpdateForm:
    return ProfileUpdateForm(**dict(locals()))


def _applied_to_response(application: JobApplication) -> AppliedJobResponse:
    job = JobResponse.model_validate(application.job).model_dump()
    return AppliedJobResponse(
        **job,
        application_id=application.id,
        application_status=application.status,
        applied_at=application.applied_at,
    )


@router.get("/users/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return profile_service.get_profile(db, actor, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching profile for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to fetch profile", cause=e) from e


@router.put("/users/{user_id}", response_model=ProfileUpdated)
def update_profile(
    user_id: str,
    form: ProfileUpdateForm = Depends(_profile_form),
    resume: UploadFile | None = File(None),
    profile_pic: UploadFile | None = File(None),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        profile = profile_service.update_profile(db, actor, user_id, form, resume=resume, profile_pic=profile_pic)
        return ProfileUpdated(user=profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Updating profile for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to update profile", cause=e) from e


@router.put("/users/{user_id}/upload-resume", response_model=ProfileUpdated)
def upload_resume(
    user_id: str,
    resume: UploadFile | None = File(None),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        profile = profile_service.upload_resume(db, actor, user_id, resume)
        return ProfileUpdated(message="Resume uploaded successfully", user=profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Resume upload for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to upload resume", cause=e) from e


@router.get("/users/{user_id}/saved-jobs", response_model=list[JobResponse])
def saved_jobs(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return job_service.list_saved(db, actor, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching saved jobs for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to fetch saved jobs", cause=e) from e


@router.get("/users/{user_id}/applied-jobs", response_model=list[AppliedJobResponse])
def applied_jobs(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return [_applied_to_response(a) for a in job_service.list_applied(db, actor, user_id)]
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching applied jobs for user=%s failed: %s", user_id, e)
        raise ServerError("Failed to fetch applied jobs", cause=e) from e


@router.get("/candidates/{candidate_id}", response_model=CandidateSummary)
def get_candidate(
    candidate_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return profile_service.get_candidate_summary(db, candidate_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching candidate=%s failed: %s", candidate_id, e)
        raise ServerError("Failed to fetch candidate", cause=e) from e
