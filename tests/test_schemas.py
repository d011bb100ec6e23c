import pytest
from pydantic import ValidationError

from jobportal.schemas.auth import CandidateSignup, EmployerSignup, LoginRequest
from jobportal.schemas.company import CompanyProfileResponse
from jobportal.schemas.job import JobCreate, JobResponse

CANDIDATE = {
    "name": "Asha Rao",
    "email": "asha@example.com",
    "phone": "9876543210",
    "location": "Pune",
    "password": "secret123",
}


def test_candidate_signup_valid():
    data = CandidateSignup(**{**CANDIDATE, "name": "  Asha Rao "})
    assert data.name == "Asha Rao"


@pytest.mark.parametrize(
    "field,value",
    [
        ("name", "Asha99"),
        ("email", "not-an-email"),
        ("phone", "98765"),
        ("phone", "98765432101"),
        ("location", "  "),
        ("password", "12345"),
    ],
)
def test_candidate_signup_rejects(field, value):
    with pytest.raises(ValidationError):
        CandidateSignup(**{**CANDIDATE, field: value})


def test_employer_signup_by_alias_and_by_name():
    base = {"name": "Ravi", "email": "hr@acme.com", "phone": "9123456780", "password": "secret123", "industry": "IT"}
    by_alias = EmployerSignup(**base, companyName="Acme", companySize="10")
    by_name = EmployerSignup(**base, company_name="Acme", company_size="10")
    assert by_alias.company_name == by_name.company_name == "Acme"


def test_login_identifier_accepts_email_or_phone_only():
    assert LoginRequest(identifier=" asha@example.com ", password="secret123").identifier == "asha@example.com"
    assert LoginRequest(identifier="9876543210", password="secret123").identifier == "9876543210"
    with pytest.raises(ValidationError):
        LoginRequest(identifier="asha", password="secret123")


def test_emails_are_lowercased_for_signup_and_login():
    base = {"name": "Ravi", "phone": "9123456780", "password": "secret123", "industry": "IT"}
    signup = EmployerSignup(**base, email="HR@Acme.COM", companyName="Acme", companySize="10")
    assert signup.email == "hr@acme.com"
    assert LoginRequest(identifier="HR@Acme.COM", password="secret123").identifier == "hr@acme.com"


def test_job_create_blank_optionals_become_none():
    job = JobCreate(title="T", job_type="Full-time", description="D", company="C", salary_min="", location=" ")
    assert job.salary_min is None
    assert job.location is None
    with pytest.raises(ValidationError):
        JobCreate(title=" ", job_type="Full-time", description="D", company="C")


def test_job_response_skills_normalized():
    base = {"id": "j1", "title": "T", "job_type": "x", "description": "d", "company": "c", "posted_by": "e"}
    assert JobResponse(**base, skills="Python").skills == ["Python"]
    assert JobResponse(**base, skills=None).skills == []


def test_company_profile_response_reads_reviews_count():
    profile = CompanyProfileResponse.model_validate(
        {"id": "e1", "company_name": "Acme", "reviews_count": 4, "jobs": None, "reviews": "[1]"}
    )
    assert profile.reviewsCount == 4
    assert profile.jobs == []
    assert profile.reviews == [1]
