from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from jobportal.core.json_columns import decode_skills

APPLICATION_STATUSES = ("Pending", "Applied", "Shortlisted", "Rejected", "Hired", "Reviewed")


class JobCreate(BaseModel):
    """Multipart form fields for posting a job."""

    title: str
    job_type: str
    description: str
    company: str
    salary_min: float | None = None
    salary_max: float | None = None
    salary_type: str | None = "Yearly"
    location: str | None = None
    experience: str | None = None
    work_location: str | None = None
    application_deadline: date | None = None
    skills: str | None = None  # comma-separated
    company_size: str | None = None
    benefits: str | None = None
    category: str | None = None
    requirements: str | None = None
    apply_url: str | None = None

    @field_validator("title", "job_type", "description", "company")
    @classmethod
    def required_text(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} is required")
        return v.strip()

    @field_validator(
        "salary_min",
        "salary_max",
        "salary_type",
        "location",
        "experience",
        "work_location",
        "application_deadline",
        "skills",
        "company_size",
        "benefits",
        "category",
        "requirements",
        "apply_url",
        mode="before",
    )
    @classmethod
    def blank_as_none(cls, v):
        # HTML forms submit untouched inputs as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class JobResponse(BaseModel):
    id: str
    title: str
    job_type: str
    description: str
    salary_min: float | None = None
    salary_max: float | None = None
    salary_type: str | None = None
    company: str
    location: str | None = None
    experience: str | None = None
    work_location: str | None = None
    application_deadline: date | None = None
    skills: list = Field(default_factory=list)
    company_size: str | None = None
    benefits: str | None = None
    category: str | None = None
    requirements: str | None = None
    apply_url: str | None = None
    posted_by: str
    logo: str | None = None
    date_posted: datetime | None = None
    status: str | None = None
    views: int = 0

    class Config:
        from_attributes = True

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v) -> list:
        return decode_skills(v)


class AppliedJobResponse(JobResponse):
    application_id: str
    application_status: str
    applied_at: datetime | None = None


class JobCreated(BaseModel):
    message: str = "Job posted successfully"
    jobId: str


class JobInteractionStatus(BaseModel):
    isSaved: bool
    hasApplied: bool
    isReported: bool


class ApplyRequest(BaseModel):
    user_id: str
    job_id: str
    resume_link: str
    name: str
    phone: str
    email: EmailStr
    cover_letter: str | None = None

    @field_validator("resume_link", "name", "phone")
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} is required")
        return v.strip()


class ApplicationCreated(BaseModel):
    message: str = "Application submitted successfully"
    applicationId: str


class ReportRequest(BaseModel):
    reason: str | None = None
    details: str | None = None


class ApplicationStatusUpdate(BaseModel):
    status: str | None = None


class ApplicationResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    status: str
    applied_at: datetime | None = None
    cover_letter: str | None = None
    resume_link: str | None = None
    name: str | None = None
    phone: str | None = None
    email: str | None = None

    class Config:
        from_attributes = True


class ApplicationStatusResponse(BaseModel):
    message: str = "Application status updated successfully"
    application: ApplicationResponse


class JobApplicationsResponse(BaseModel):
    applications: list[ApplicationResponse]
