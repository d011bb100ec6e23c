import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from jobportal.config import PLACEHOLDER_SECRET_KEY, settings
from jobportal.core.errors import ServerError
from jobportal.core.rate_limiter import AUTH_PATHS, rate_limiter
from jobportal.database import Database
from jobportal.logging_config import setup_logging
from jobportal.routers import applications, auth, companies, jobs, messages, notifications, users

setup_logging()
logger = logging.getLogger(__name__)


def check_startup_settings() -> None:
    if settings.is_production:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        if "username:password@" in settings.database_url:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
    else:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
        if "username:password@" in settings.database_url:
            logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    return f"{loc[-1]}: {msg}" if loc else msg


def create_app(database: Database | None = None) -> FastAPI:
    database = database or Database(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Job Portal API")
        check_startup_settings()
        database.open()
        database.create_all()
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title="Job Portal API",
        description="Candidates, employers, job postings, applications and notifications.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for module in (auth, jobs, applications, users, notifications, messages, companies):
        app.include_router(module.router)

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    @app.exception_handler(ServerError)
    async def server_error_handler(request, exc: ServerError):
        content = {"detail": exc.detail}
        if exc.cause is not None and not settings.is_production:
            content["error"] = str(exc.cause)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError):
        logger.info("Rejected request on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request, exc):
        logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.middleware("http")
    async def apply_rate_limits(request, call_next):
        if request.method == "OPTIONS" or request.url.path not in AUTH_PATHS:
            return await call_next(request)

        limit = settings.rate_limit_auth_per_min
        if limit > 0:
            client_ip = request.client.host if request.client else "unknown"
            key = f"{client_ip}:{request.url.path}"
            allowed, retry_after = rate_limiter.hit(key, limit=limit, window_seconds=60)
            if not allowed:
                return JSONResponse(
                    status_code=429,
                    content={"detail": "Too many requests. Please retry shortly."},
                    headers={"Retry-After": str(retry_after)},
                )

        return await call_next(request)

    @app.get("/health/live")
    def health_live():
        return {"status": "ok"}

    @app.get("/health/ready")
    def health_ready():
        try:
            app.state.database.ping()
            return {"status": "ready"}
        except Exception:
            logger.exception("Readiness check failed")
            return JSONResponse(status_code=503, content={"status": "not_ready"})

    @app.get("/")
    def root():
        return {"message": "Job Portal API. See /docs for the available endpoints."}

    return app


app = create_app()
