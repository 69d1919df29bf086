"""Tests for the dashboard API endpoints."""


class TestDashboardEndpoints:
    def test_dashboard(self, test_client, auth_headers, job_payload):
        job = test_client.post("/jobs", json=job_payload, headers=auth_headers).json()
        test_client.post(
            "/tracker", json={"jobId": job["data"]["id"]}, headers=auth_headers
        )

        response = test_client.get("/dashboard", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        titles = [card["title"] for card in data["stats"]]
        assert titles == ["Total Applications", "Interviews", "Offers", "Pending"]
        assert data["stats"][0]["value"] == 1
        assert data["stats"][0]["change"] == 100
        assert data["recentApplications"][0]["company"] == "acme"
        assert data["upcomingInterviews"] == []

    def test_dashboard_for_deleted_job(self, test_client, auth_headers, job_payload):
        job_id = test_client.post(
            "/jobs", json=job_payload, headers=auth_headers
        ).json()["data"]["id"]
        test_client.post("/tracker", json={"jobId": job_id}, headers=auth_headers)
        test_client.delete(f"/jobs/{job_id}", headers=auth_headers)

        recent = test_client.get("/dashboard", headers=auth_headers).json()["data"][
            "recentApplications"
        ]

        assert recent[0]["company"] == "Unknown Company"
        assert recent[0]["position"] == "Unknown Position"

    def test_quick_stats(self, test_client, auth_headers, job_payload):
        job = test_client.post("/jobs", json=job_payload, headers=auth_headers).json()
        test_client.post(
            "/tracker",
            json={"jobId": job["data"]["id"], "status": "interviewing"},
            headers=auth_headers,
        )

        data = test_client.get("/dashboard/quick-stats", headers=auth_headers).json()[
            "data"
        ]

        assert data == {"applications": 1, "jobs": 1, "interviews": 1}

    def test_requires_identity(self, test_client):
        assert test_client.get("/dashboard").status_code == 401
