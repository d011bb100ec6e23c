import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import Actor
from jobportal.database import get_db
from jobportal.dependencies import get_current_actor
from jobportal.schemas.company import CompanyProfileResponse, CompanyProfileUpdate
from jobportal.services import company_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["companies"])


@router.get("/companies", response_model=list[CompanyProfileResponse])
def list_companies(db: Session = Depends(get_db)):
    try:
        return company_service.list_companies(db)
    except Exception as e:
        logger.exception("Listing companies failed: %s", e)
        raise ServerError("Failed to fetch companies", cause=e) from e


@router.get("/companyprofile/{profile_id}", response_model=CompanyProfileResponse)
def get_company_profile(
    profile_id: str,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        return company_service.get_company_profile(db, profile_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching company profile=%s failed: %s", profile_id, e)
        raise ServerError("Failed to fetch company profile", cause=e) from e


@router.put("/companyprofile/{profile_id}", response_model=CompanyProfileResponse)
def update_company_profile(
    profile_id: str,
    data: CompanyProfileUpdate,
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    try:
        profile = company_service.update_company_profile(db, actor, profile_id, data)
        logger.info("Company profile %s updated", profile_id)
        return profile
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Updating company profile=%s failed: %s", profile_id, e)
        raise ServerError("Failed to update company profile", cause=e) from e
