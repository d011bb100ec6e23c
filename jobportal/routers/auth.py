import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobportal.core.errors import ServerError
from jobportal.core.security import CANDIDATE, EMPLOYER
from jobportal.database import get_db
from jobportal.models.user import User
from jobportal.schemas.auth import (
    CandidateSignup,
    EmployerListItem,
    EmployerSignup,
    LoginRequest,
    LoginResponse,
    SignupResponse,
    UserSummary,
)
from jobportal.services import credential_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


def _login_response(user: User, token: str) -> LoginResponse:
    return LoginResponse(token=token, user_id=user.id, user=UserSummary.model_validate(user))


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(data: CandidateSignup, db: Session = Depends(get_db)):
    try:
        user = credential_service.register_candidate(db, data)
        return SignupResponse(message="User registered successfully", userId=user.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Signup failed for email=%s: %s", data.email, e)
        raise ServerError("Registration failed", cause=e) from e


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user, token = credential_service.login(db, data.identifier, data.password, CANDIDATE)
        return _login_response(user, token)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed: %s", e)
        raise ServerError("Login failed", cause=e) from e


@router.post("/employer/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def employer_signup(data: EmployerSignup, db: Session = Depends(get_db)):
    try:
        user = credential_service.register_employer(db, data)
        return SignupResponse(message="Employer registered successfully", userId=user.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Employer signup failed for email=%s: %s", data.email, e)
        raise ServerError("Registration failed", cause=e) from e


@router.post("/employer/login", response_model=LoginResponse)
def employer_login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user, token = credential_service.login(db, data.identifier, data.password, EMPLOYER)
        return _login_response(user, token)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Employer login failed: %s", e)
        raise ServerError("Login failed", cause=e) from e


@router.get("/employers", response_model=list[EmployerListItem])
def list_employers(db: Session = Depends(get_db)):
    try:
        return credential_service.list_employers(db)
    except Exception as e:
        logger.exception("Listing employers failed: %s", e)
        raise ServerError("Failed to fetch employers", cause=e) from e
