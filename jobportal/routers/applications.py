import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.schemas.job import (
    ApplicationCreated,
    ApplicationResponse,
    ApplicationStatusResponse,
    ApplicationStatusUpdate,
    ApplyRequest,
    JobApplicationsResponse,
)
from jobportal.services import job_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["applications"])


@router.post("/apply", response_model=ApplicationCreated, status_code=status.HTTP_201_CREATED)
def apply_with_details(
    data: ApplyRequest,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        application = job_service.apply_detailed(db, actor, data)
        return ApplicationCreated(applicationId=application.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Detailed apply to job=%s failed for user=%s: %s", data.job_id, actor.id, e)
        raise ServerError("Failed to submit application", cause=e) from e


@router.get("/applications/job/{job_id}", response_model=JobApplicationsResponse)
def list_applications(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        applications = job_service.list_applications_for_job(db, actor, job_id)
        return JobApplicationsResponse(
            applications=[ApplicationResponse.model_validate(a) for a in applications]
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Listing applications for job=%s failed: %s", job_id, e)
        raise ServerError("Failed to fetch applications", cause=e) from e


@router.put("/applications/status/{application_id}", response_model=ApplicationStatusResponse)
def update_status(
    application_id: str,
    data: ApplicationStatusUpdate,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        application = job_service.set_application_status(db, application_id, data.status)
        logger.info("Application %s set to %s by user %s", application_id, data.status, actor.id)
        return ApplicationStatusResponse(application=ApplicationResponse.model_validate(application))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Updating application=%s failed: %s", application_id, e)
        raise ServerError("Failed to update application status", cause=e) from e


@router.delete("/applications/{job_id}")
def withdraw(
    job_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        job_service.withdraw(db, actor, job_id)
        return {"message": "Application withdrawn successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Withdrawing application for job=%s failed: %s", job_id, e)
        raise ServerError("Failed to withdraw application", cause=e) from e
