from datetime import datetime
from io import BytesIO
from types import SimpleNamespace

import jobportal.routers.users as users_mod
from jobportal.core.errors import Forbidden, NotFound, UnsupportedMediaType


def _profile(**overrides):
    data = {
        "user_id": "cand-1",
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "role": "candidate",
        "location": "Pune",
        "education": [{"title": "BSc", "institution": "Pune Univ", "year": "2019"}],
        "experience": [],
        "certifications": [],
        "languages": ["English"],
    }
    data.update(overrides)
    return data


def test_get_profile(monkeypatch, client):
    monkeypatch.setattr(users_mod.profile_service, "get_profile", lambda db, actor, user_id: _profile())
    resp = client.get("/users/cand-1")
    assert resp.status_code == 200
    assert resp.json()["education"][0]["title"] == "BSc"
    assert resp.json()["languages"] == ["English"]


def test_get_other_profile_is_403(monkeypatch, client):
    def _forbidden(db, actor, user_id):
        raise Forbidden()

    monkeypatch.setattr(users_mod.profile_service, "get_profile", _forbidden)
    assert client.get("/users/someone-else").status_code == 403


def test_update_profile_multipart(monkeypatch, client):
    seen = {}

    def _update(db, actor, user_id, form, resume=None, profile_pic=None):
        seen["form"] = form
        seen["resume"] = resume.filename if resume else None
        seen["profile_pic"] = profile_pic
        return _profile(name=form.name)

    monkeypatch.setattr(users_mod.profile_service, "update_profile", _update)
    resp = client.put(
        "/users/cand-1",
        data={
            "name": "Asha R",
            "email": "asha@example.com",
            "phone": "9876543210",
            "location": "Pune",
            "education": '[{"title": "BSc"}]',
        },
        files={"resume": ("cv.pdf", BytesIO(b"%PDF"), "application/pdf")},
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Profile updated successfully"
    assert resp.json()["user"]["name"] == "Asha R"
    assert seen["form"].education == '[{"title": "BSc"}]'
    assert seen["form"].languages is None
    assert seen["resume"] == "cv.pdf"
    assert seen["profile_pic"] is None


def test_update_profile_bad_file_type(monkeypatch, client):
    def _reject(db, actor, user_id, form, resume=None, profile_pic=None):
        raise UnsupportedMediaType("Invalid file type for resume")

    monkeypatch.setattr(users_mod.profile_service, "update_profile", _reject)
    resp = client.put(
        "/users/cand-1",
        data={"name": "Asha"},
        files={"resume": ("cv.exe", BytesIO(b"MZ"), "application/x-msdownload")},
    )
    assert resp.status_code == 415


def test_upload_resume(monkeypatch, client):
    monkeypatch.setattr(
        users_mod.profile_service,
        "upload_resume",
        lambda db, actor, user_id, resume: _profile(resume_link="/uploads/resumes/1.pdf"),
    )
    resp = client.put(
        "/users/cand-1/upload-resume",
        files={"resume": ("cv.pdf", BytesIO(b"%PDF"), "application/pdf")},
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Resume uploaded successfully"
    assert resp.json()["user"]["resume_link"] == "/uploads/resumes/1.pdf"


def _job(**overrides):
    data = {
        "id": "j1",
        "title": "Backend Engineer",
        "job_type": "Full-time",
        "description": "Build APIs",
        "company": "Acme",
        "posted_by": "emp-1",
        "skills": '["Python"]',
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def test_saved_jobs(monkeypatch, client):
    monkeypatch.setattr(users_mod.job_service, "list_saved", lambda db, actor, user_id: [_job()])
    resp = client.get("/users/cand-1/saved-jobs")
    assert resp.status_code == 200
    assert resp.json()[0]["skills"] == ["Python"]


def test_applied_jobs_carry_application_status(monkeypatch, client):
    applied_at = datetime(2026, 3, 1, 12, 0, 0)
    application = SimpleNamespace(id="a1", status="Shortlisted", applied_at=applied_at, job=_job())
    monkeypatch.setattr(users_mod.job_service, "list_applied", lambda db, actor, user_id: [application])
    resp = client.get("/users/cand-1/applied-jobs")
    assert resp.status_code == 200
    item = resp.json()[0]
    assert item["id"] == "j1"
    assert item["application_id"] == "a1"
    assert item["application_status"] == "Shortlisted"
    assert item["applied_at"].startswith("2026-03-01")


def test_candidate_summary(monkeypatch, employer_client):
    candidate = SimpleNamespace(id="c1", name="Asha", email="asha@example.com", phone="9876543210")
    monkeypatch.setattr(users_mod.profile_service, "get_candidate_summary", lambda db, candidate_id: candidate)
    resp = employer_client.get("/candidates/c1")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Asha"


def test_candidate_summary_missing(monkeypatch, employer_client):
    def _missing(db, candidate_id):
        raise NotFound("Candidate not found")

    monkeypatch.setattr(users_mod.profile_service, "get_candidate_summary", _missing)
    assert employer_client.get("/candidates/nope").status_code == 404
