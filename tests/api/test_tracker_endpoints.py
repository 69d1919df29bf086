"""Tests for the tracker API endpoints."""

import pytest


@pytest.fixture
def job_id(test_client, auth_headers, job_payload):
    response = test_client.post("/jobs", json=job_payload, headers=auth_headers)
    assert response.status_code == 201
    return response.json()["data"]["id"]


def _track(client, headers, job_id, status=None):
    payload = {"jobId": job_id}
    if status is not None:
        payload["status"] = status
    return client.post("/tracker", json=payload, headers=headers)


class TestCreateApplication:
    def test_create_applied(self, test_client, auth_headers, job_id):
        response = _track(test_client, auth_headers, job_id, "applied")

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["status"] == "applied"
        assert data["appliedDate"] is not None
        assert data["responseDate"] is None
        assert data["userId"] == "user-alice"
        assert data["job"]["company"] == "acme"

    def test_default_status_is_saved(self, test_client, auth_headers, job_id):
        data = _track(test_client, auth_headers, job_id).json()["data"]
        assert data["status"] == "saved"
        assert data["appliedDate"] is None

    def test_duplicate(self, test_client, auth_headers, job_id):
        _track(test_client, auth_headers, job_id)
        response = _track(test_client, auth_headers, job_id, "applied")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Application for this job already exists",
        }

    def test_empty_status(self, test_client, auth_headers, job_id):
        response = _track(test_client, auth_headers, job_id, "")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid status"

    def test_unknown_job(self, test_client, auth_headers):
        response = _track(test_client, auth_headers, "does-not-exist")
        assert response.status_code == 404
        assert response.json()["error"] == "Job not found"

    def test_invalid_status(self, test_client, auth_headers, job_id):
        response = _track(test_client, auth_headers, job_id, "hired")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid status"

    def test_missing_identity(self, test_client, job_id):
        response = _track(test_client, {}, job_id)
        assert response.status_code == 401
        assert response.json()["success"] is False
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_missing_job_id(self, test_client, auth_headers):
        response = test_client.post("/tracker", json={}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestBoard:
    def test_board_is_per_user(self, test_client, auth_headers, other_headers, job_id):
        _track(test_client, auth_headers, job_id, "interviewing")
        _track(test_client, other_headers, job_id)

        board = test_client.get("/tracker", headers=auth_headers).json()["data"]

        assert set(board) == {"saved", "applied", "interviewing", "offer", "rejected"}
        assert len(board["interviewing"]) == 1
        assert board["saved"] == []


class TestUpdateApplication:
    def test_status_pipeline(self, test_client, auth_headers, job_id):
        record = _track(test_client, auth_headers, job_id).json()["data"]

        applied = test_client.put(
            f"/tracker/{record['id']}", json={"status": "applied"}, headers=auth_headers
        ).json()["data"]
        offer = test_client.put(
            f"/tracker/{record['id']}", json={"status": "offer"}, headers=auth_headers
        ).json()["data"]

        assert applied["appliedDate"] is not None
        assert offer["appliedDate"] == applied["appliedDate"]
        assert offer["responseDate"] is not None

    def test_forbidden_vs_not_found(
        self, test_client, auth_headers, other_headers, job_id
    ):
        record = _track(test_client, auth_headers, job_id).json()["data"]

        forbidden = test_client.put(
            f"/tracker/{record['id']}", json={"status": "applied"}, headers=other_headers
        )
        missing = test_client.put(
            "/tracker/unknown", json={"status": "applied"}, headers=auth_headers
        )

        assert forbidden.status_code == 403
        assert forbidden.json()["error"] == "Not authorized to update this application"
        assert missing.status_code == 404
        assert missing.json()["error"] == "Application not found"

    def test_invalid_status(self, test_client, auth_headers, job_id):
        record = _track(test_client, auth_headers, job_id).json()["data"]
        response = test_client.put(
            f"/tracker/{record['id']}", json={"status": "ghosted"}, headers=auth_headers
        )
        assert response.status_code == 400

    def test_patch_details(self, test_client, auth_headers, job_id):
        record = _track(test_client, auth_headers, job_id, "interviewing").json()["data"]

        response = test_client.patch(
            f"/tracker/{record['id']}",
            json={
                "interviewDate": "2026-04-01T10:00:00",
                "interviewTime": "10:00",
                "interviewType": "Technical",
                "notes": "Bring portfolio",
            },
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "interviewing"
        assert data["interviewType"] == "Technical"
        assert data["notes"] == "Bring portfolio"
        assert data["interviewDate"].startswith("2026-04-01T10:00")

    def test_patch_converts_offset_to_utc(self, test_client, auth_headers, job_id):
        record = _track(test_client, auth_headers, job_id, "interviewing").json()["data"]

        response = test_client.patch(
            f"/tracker/{record['id']}",
            json={"interviewDate": "2026-10-20T22:46:52+14:00"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["interviewDate"] == "2026-10-20T08:46:52"

    def test_patch_rejects_unknown_interview_type(
        self, test_client, auth_headers, job_id
    ):
        record = _track(test_client, auth_headers, job_id).json()["data"]
        response = test_client.patch(
            f"/tracker/{record['id']}",
            json={"interviewType": "Lunch"},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestDeleteApplication:
    def test_delete(self, test_client, auth_headers, other_headers, job_id):
        record = _track(test_client, auth_headers, job_id).json()["data"]

        forbidden = test_client.delete(f"/tracker/{record['id']}", headers=other_headers)
        deleted = test_client.delete(f"/tracker/{record['id']}", headers=auth_headers)
        again = test_client.delete(f"/tracker/{record['id']}", headers=auth_headers)

        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["data"] == {}
        assert again.status_code == 404
        assert test_client.get(f"/jobs/{job_id}").status_code == 200
