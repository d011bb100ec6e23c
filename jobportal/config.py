from pydantic_settings import BaseSettings

PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    candidate_token_expire_minutes: int = 60  # 1 hour
    employer_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # Connection pool; callers wait up to db_pool_timeout seconds when exhausted
    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: int = 30

    # CORS origins as comma-separated values, "*" for any
    cors_allow_origins: str = "*"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Uploaded resumes, profile pictures and logos are written here and served under /uploads
    upload_dir: str = "uploads"
    max_upload_mb: int = 5

    # Request guards
    rate_limit_auth_per_min: int = 20

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return (self.app_env or "development").lower() in {"production", "prod"}


settings = Settings()
