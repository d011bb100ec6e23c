"""Full request flow against a real app instance and an in-memory database."""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from jobportal.database import Database
from jobportal.main import create_app


@pytest.fixture
def api():
    app = create_app(Database("sqlite://"))
    with TestClient(app) as client:
        yield client


def _register_and_login(api, kind, name, email, phone):
    if kind == "employer":
        body = {
            "name": name,
            "email": email,
            "phone": phone,
            "password": "secret123",
            "companyName": f"{name} Inc",
            "industry": "Software",
            "companySize": "10-50",
        }
        signup, login = "/employer/signup", "/employer/login"
    else:
        body = {"name": name, "email": email, "phone": phone, "location": "Pune", "password": "secret123"}
        signup, login = "/signup", "/login"
    resp = api.post(signup, json=body)
    assert resp.status_code == 201, resp.text
    resp = api.post(login, json={"identifier": email, "password": "secret123"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    return data["user_id"], {"Authorization": f"Bearer {data['token']}"}


def test_ready_after_startup(api):
    assert api.get("/health/ready").json() == {"status": "ready"}


def test_employer_and_candidate_lifecycle(api):
    employer_id, employer = _register_and_login(api, "employer", "Ravi", "ravi@acme.com", "9000000001")
    other_id, other_employer = _register_and_login(api, "employer", "Mira", "mira@globex.com", "9000000002")
    candidate_id, candidate = _register_and_login(api, "candidate", "Asha", "asha@example.com", "9000000003")

    # A candidate account does not log in on the employer surface.
    resp = api.post("/employer/login", json={"identifier": "asha@example.com", "password": "secret123"})
    assert resp.status_code == 401

    deadline = (datetime.now(timezone.utc).date() + timedelta(days=2)).isoformat()
    resp = api.post(
        "/jobs",
        headers=employer,
        data={
            "title": "Backend Engineer",
            "job_type": "Full-time",
            "description": "Build APIs",
            "company": "Ravi Inc",
            "skills": "Python, SQL",
            "application_deadline": deadline,
        },
    )
    assert resp.status_code == 201, resp.text
    job_id = resp.json()["jobId"]

    assert api.post("/jobs", headers=candidate, data={"title": "T", "job_type": "x", "description": "d", "company": "c"}).status_code == 403

    listed = api.get("/jobs").json()
    assert [j["skills"] for j in listed] == [["Python", "SQL"]]

    assert api.get(f"/jobs/{job_id}", headers=candidate).json()["views"] == 1
    assert api.get(f"/jobs/{job_id}", headers=candidate).json()["views"] == 2

    assert api.post(f"/jobs/{job_id}/save", headers=candidate).json() == {"message": "Job saved"}
    assert api.post(f"/jobs/{job_id}/apply", headers=candidate).status_code == 201
    resp = api.post(f"/jobs/{job_id}/apply", headers=candidate)
    assert resp.status_code == 400
    assert "already applied" in resp.json()["detail"]

    assert api.get(f"/jobs/{job_id}/status", headers=candidate).json() == {
        "isSaved": True,
        "hasApplied": True,
        "isReported": False,
    }
    assert api.get(f"/notifications/{candidate_id}/unread", headers=candidate).json() == {"unreadCount": 1}
    assert api.get(f"/notifications/{candidate_id}", headers=employer).status_code == 403

    applications = api.get(f"/applications/job/{job_id}", headers=employer).json()["applications"]
    assert [a["user_id"] for a in applications] == [candidate_id]
    resp = api.put(f"/applications/status/{applications[0]['id']}", headers=employer, json={"status": "Shortlisted"})
    assert resp.json()["application"]["status"] == "Shortlisted"
    applied = api.get(f"/users/{candidate_id}/applied-jobs", headers=candidate).json()
    assert applied[0]["application_status"] == "Shortlisted"

    resp = api.post("/messages", headers=employer, json={"candidateId": candidate_id, "message": "Let's talk"})
    assert resp.status_code == 201
    assert api.post("/messages", headers=employer, json={"candidateId": other_id, "message": "Hi"}).status_code == 404

    assert api.delete(f"/jobs/{job_id}", headers=other_employer).status_code == 404
    assert api.delete(f"/jobs/{job_id}", headers=employer).status_code == 200
    assert api.get(f"/jobs/{job_id}", headers=candidate).status_code == 404
    assert employer_id != other_id


def test_duplicate_signup_is_409(api):
    _register_and_login(api, "candidate", "Asha", "asha@example.com", "9000000003")
    body = {"name": "Other", "email": "asha@example.com", "phone": "9000000004", "location": "Pune", "password": "secret123"}
    resp = api.post("/signup", json=body)
    assert resp.status_code == 409


def test_profile_update_round_trip(api):
    candidate_id, candidate = _register_and_login(api, "candidate", "Asha", "asha@example.com", "9000000003")
    resp = api.put(
        f"/users/{candidate_id}",
        headers=candidate,
        data={
            "name": "Asha Rao",
            "email": "asha@example.com",
            "phone": "9000000003",
            "location": "Mumbai",
            "languages": '["English", "Marathi"]',
            "certifications": '[{"title": "AWS", "institution": "Amazon", "year": "2024"}]',
        },
        files={"profile_pic": ("me.png", b"PNGDATA", "image/png")},
    )
    assert resp.status_code == 200, resp.text
    user = resp.json()["user"]
    assert user["languages"] == ["English", "Marathi"]
    assert user["certifications"][0]["title"] == "AWS"
    assert user["profile_pic"].startswith("/uploads/profile_pics/")
    assert api.get(user["profile_pic"]).content == b"PNGDATA"

    resp = api.get(f"/users/{candidate_id}", headers=candidate)
    assert resp.json()["location"] == "Mumbai"
