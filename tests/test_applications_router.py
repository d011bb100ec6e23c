from types import SimpleNamespace

import jobportal.routers.applications as apps_mod
from jobportal.core.errors import BadRequest, Forbidden, NotFound


def _application(**overrides):
    data = {"id": "a1", "user_id": "cand-1", "job_id": "j1", "status": "Pending"}
    data.update(overrides)
    return SimpleNamespace(**data)


APPLY = {
    "user_id": "cand-1",
    "job_id": "j1",
    "resume_link": "/uploads/resumes/cv.pdf",
    "name": "Asha",
    "phone": "9876543210",
    "email": "asha@example.com",
    "cover_letter": "Hi",
}


def test_apply_with_details(monkeypatch, client):
    monkeypatch.setattr(apps_mod.job_service, "apply_detailed", lambda db, actor, data: _application(id="a7"))
    resp = client.post("/apply", json=APPLY)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Application submitted successfully", "applicationId": "a7"}


def test_apply_with_details_requires_fields(client):
    resp = client.post("/apply", json={**APPLY, "resume_link": " "})
    assert resp.status_code == 400
    resp = client.post("/apply", json={k: v for k, v in APPLY.items() if k != "email"})
    assert resp.status_code == 400


def test_apply_with_details_for_other_user(monkeypatch, client):
    def _forbidden(db, actor, data):
        raise Forbidden("Unauthorized: User ID mismatch")

    monkeypatch.setattr(apps_mod.job_service, "apply_detailed", _forbidden)
    assert client.post("/apply", json={**APPLY, "user_id": "other"}).status_code == 403


def test_list_applications_for_job(monkeypatch, employer_client):
    monkeypatch.setattr(
        apps_mod.job_service,
        "list_applications_for_job",
        lambda db, actor, job_id: [_application(), _application(id="a2", user_id="cand-2")],
    )
    resp = employer_client.get("/applications/job/j1")
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()["applications"]] == ["a1", "a2"]


def test_update_status(monkeypatch, employer_client):
    monkeypatch.setattr(
        apps_mod.job_service,
        "set_application_status",
        lambda db, application_id, status: _application(id=application_id, status=status),
    )
    resp = employer_client.put("/applications/status/a1", json={"status": "Hired"})
    assert resp.status_code == 200
    assert resp.json()["application"]["status"] == "Hired"


def test_update_status_invalid(monkeypatch, employer_client):
    def _bad(db, application_id, status):
        raise BadRequest("Invalid status")

    monkeypatch.setattr(apps_mod.job_service, "set_application_status", _bad)
    assert employer_client.put("/applications/status/a1", json={"status": "Maybe"}).status_code == 400


def test_withdraw(monkeypatch, client):
    monkeypatch.setattr(apps_mod.job_service, "withdraw", lambda db, actor, job_id: None)
    assert client.delete("/applications/j1").status_code == 200

    def _missing(db, actor, job_id):
        raise NotFound("Application not found")

    monkeypatch.setattr(apps_mod.job_service, "withdraw", _missing)
    assert client.delete("/applications/j1").status_code == 404
