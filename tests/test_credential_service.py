import pytest

from jobportal.core.errors import AccountNotFound, Conflict, InvalidCredentials
from jobportal.core.security import CANDIDATE, EMPLOYER, decode_access_token
from jobportal.models.company_profile import CompanyProfile
from jobportal.schemas.auth import CandidateSignup, EmployerSignup
from jobportal.services import credential_service


def _candidate(**overrides) -> CandidateSignup:
    data = {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "location": "Pune",
        "password": "secret123",
    }
    data.update(overrides)
    return CandidateSignup(**data)


def _employer(**overrides) -> EmployerSignup:
    data = {
        "name": "Ravi Kumar",
        "email": "hr@acme.com",
        "phone": "9123456780",
        "password": "secret123",
        "companyName": "Acme",
        "industry": "Software",
        "companySize": "50-200",
    }
    data.update(overrides)
    return EmployerSignup(**data)


def test_register_candidate_hashes_password(db):
    user = credential_service.register_candidate(db, _candidate())
    assert user.role == CANDIDATE
    assert user.password_hash != "secret123"


def test_duplicate_email_is_conflict(db):
    credential_service.register_candidate(db, _candidate())
    with pytest.raises(Conflict) as ex:
        credential_service.register_candidate(db, _candidate(phone="9000000000"))
    assert "email" in ex.value.detail


def test_duplicate_phone_is_conflict_across_roles(db):
    credential_service.register_candidate(db, _candidate())
    with pytest.raises(Conflict) as ex:
        credential_service.register_employer(db, _employer(phone="9876543210"))
    assert "phone" in ex.value.detail


def test_unique_index_violation_is_remapped_to_conflict(db, monkeypatch):
    credential_service.register_candidate(db, _candidate())
    # Skip the pre-check so the insert itself hits the unique index.
    monkeypatch.setattr(credential_service.user_repo, "get_by_email_or_phone", lambda db, email, phone: None)
    with pytest.raises(Conflict):
        credential_service.register_candidate(db, _candidate())


def test_employer_signup_creates_company_profile(db):
    user = credential_service.register_employer(db, _employer())
    profile = db.get(CompanyProfile, user.id)
    assert profile is not None
    assert profile.company_name == "Acme"


def test_login_by_email_or_phone(db):
    user = credential_service.register_candidate(db, _candidate())
    for identifier in ("asha@example.com", "9876543210"):
        found, token = credential_service.login(db, identifier, "secret123", CANDIDATE)
        assert found.id == user.id
        actor = decode_access_token(token)
        assert actor.id == user.id
        assert actor.role == CANDIDATE


def test_login_wrong_password(db):
    credential_service.register_candidate(db, _candidate())
    with pytest.raises(InvalidCredentials) as ex:
        credential_service.login(db, "asha@example.com", "wrong-pass", CANDIDATE)
    assert ex.value.status_code == 401


def test_login_role_mismatch_is_not_found_not_bad_password(db):
    credential_service.register_candidate(db, _candidate())
    with pytest.raises(AccountNotFound) as ex:
        credential_service.login(db, "asha@example.com", "secret123", EMPLOYER)
    assert not isinstance(ex.value, InvalidCredentials)
    assert ex.value.status_code == 401


def test_list_employers_only_returns_employers(db):
    credential_service.register_candidate(db, _candidate())
    employer = credential_service.register_employer(db, _employer())
    assert [u.id for u in credential_service.list_employers(db)] == [employer.id]


def test_signup_email_is_stored_lowercase_and_login_ignores_case(db):
    user = credential_service.register_candidate(db, _candidate(email="Asha.Rao@Example.COM"))
    assert user.email == "asha.rao@example.com"
    for identifier in ("Asha.Rao@Example.COM", "asha.rao@example.com", "ASHA.RAO@EXAMPLE.COM"):
        found, _ = credential_service.login(db, identifier, "secret123", CANDIDATE)
        assert found.id == user.id


def test_duplicate_email_differing_only_in_case_is_conflict(db):
    credential_service.register_candidate(db, _candidate(email="bob@example.com"))
    with pytest.raises(Conflict) as ex:
        credential_service.register_employer(db, _employer(email="BOB@example.com"))
    assert "email" in ex.value.detail
