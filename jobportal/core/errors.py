"""Error taxonomy shared by services, the auth guard and routers.

Every error is an ``HTTPException`` carrying its own status code, so FastAPI
renders it as ``{"detail": message}`` wherever it is raised.
"""
from fastapi import HTTPException, status


class AppError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None) -> None:
        super().__init__(
            status_code=type(self).status_code,
            detail=detail or type(self).default_detail,
            headers=headers,
        )


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class DeadlinePassed(BadRequest):
    default_detail = "Job application deadline has passed"


class AlreadyApplied(BadRequest):
    default_detail = "You have already applied to this job"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidToken(Unauthenticated):
    default_detail = "Invalid or expired token"


class InvalidCredentials(Unauthenticated):
    default_detail = "Incorrect password"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Unauthorized"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class AccountNotFound(NotFound):
    # Login surface answers 401 for unknown accounts, same as a wrong password.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No account found with this email or phone"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Email or phone already exists"


class PayloadTooLarge(AppError):
    status_code = 413
    default_detail = "File too large"


class UnsupportedMediaType(AppError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    default_detail = "Unsupported file type"


class ServerError(AppError):
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(detail)
        self.cause = cause
