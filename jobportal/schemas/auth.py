import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

PHONE_RE = re.compile(r"^\d{10}$")
EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
NAME_RE = re.compile(r"^[a-zA-Z\s]+$")
MIN_PASSWORD_LENGTH = 6


def _check_phone(v: str) -> str:
    v = (v or "").strip()
    if not PHONE_RE.match(v):
        raise ValueError("Phone must be a 10-digit number")
    return v


def normalize_email(v: str) -> str:
    return (v or "").strip().lower()


def _check_password(v: str) -> str:
    if len(v or "") < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return v


class CandidateSignup(BaseModel):
    name: str
    email: EmailStr
    phone: str
    location: str
    password: str

    @field_validator("name")
    @classmethod
    def name_letters_only(cls, v: str) -> str:
        v = v.strip()
        if not v or not NAME_RE.match(v):
            raise ValueError("Name must contain only letters and spaces")
        return v

    @field_validator("location")
    @classmethod
    def location_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Location is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def phone_ten_digits(cls, v: str) -> str:
        return _check_phone(v)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)


class EmployerSignup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: EmailStr
    phone: str
    password: str
    company_name: str = Field(alias="companyName")
    industry: str
    company_size: str = Field(alias="companySize")

    @field_validator("name", "industry", "company_size")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field is required")
        return v.strip()

    @field_validator("company_name")
    @classmethod
    def company_name_min_length(cls, v: str) -> str:
        if len(v.strip()) < 2:
            raise ValueError("Company name must be at least 2 characters long")
        return v.strip()

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def phone_ten_digits(cls, v: str) -> str:
        return _check_phone(v)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)


class LoginRequest(BaseModel):
    identifier: str  # email or 10-digit phone
    password: str

    @field_validator("identifier")
    @classmethod
    def email_or_phone(cls, v: str) -> str:
        v = v.strip()
        if not (EMAIL_RE.match(v) or PHONE_RE.match(v)):
            raise ValueError("Identifier must be a valid email or 10-digit phone number")
        return normalize_email(v) if "@" in v else v

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)


class SignupResponse(BaseModel):
    message: str
    userId: str


class UserSummary(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    role: str
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    resume_link: str | None = None
    profile_pic: str | None = None
    company_name: str | None = None
    industry: str | None = None
    company_size: str | None = None

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    user_id: str
    user: UserSummary


class EmployerListItem(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    company_name: str | None = None
    industry: str | None = None
    company_size: str | None = None

    class Config:
        from_attributes = True
