# =============================================================================
# tests/test_applications_api.py - Application Endpoint Tests
# =============================================================================
# Integration tests for /api/applications through FastAPI's TestClient,
# backed by a temporary JSON store and the log-only email sink.
# =============================================================================

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_data_service, get_email_service
from app.main import app
from core.models import Application, SendResult
from lib.utils import utc_now


# =============================================================================
# Submission Tests
# =============================================================================

class TestSubmitApplication:
    """Tests for POST /api/applications."""

    def test_submit_success(self, client, sample_application_payload):
        response = client.post("/api/applications", json=sample_application_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["application"]["applicantName"] == "Sarah Chen"
        assert body["application"]["status"] == "pending"
        assert body["notification"]["recipients"] == ["cto@company.com", "eng-lead@company.com"]

    def test_submitted_id_round_trips(self, client, sample_application_payload):
        created = client.post("/api/applications", json=sample_application_payload).json()
        application_id = created["application"]["id"]

        response = client.get(f"/api/applications/{application_id}")

        assert response.status_code == 200
        assert response.json()["application"]["id"] == application_id

    def test_unconfigured_transport_still_reports_sent(self, client, sample_application_payload):
        """Test log-only mode counts as a successful notification."""
        body = client.post("/api/applications", json=sample_application_payload).json()

        assert body["notification"]["sent"] is True
        assert body["notification"]["details"] == "Email logged (transporter not configured)"
        assert body["notification"]["messageId"].startswith("mock-")

    def test_team_match_keeps_submitted_casing(self, engineering_only_service, email_service):
        """Test 'engineering' matches Engineering but is stored as submitted."""
        app.dependency_overrides[get_data_service] = lambda: engineering_only_service
        app.dependency_overrides[get_email_service] = lambda: email_service
        try:
            response = TestClient(app).post("/api/applications", json={
                "applicantName": "A",
                "applicantEmail": "a@b.com",
                "position": "X",
                "team": "engineering",
            })
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 201
        assert response.json()["application"]["team"] == "engineering"
        stored = engineering_only_service.get_all_applications()
        assert [a.team for a in stored] == ["engineering"]

    def test_unknown_team_rejected_and_not_saved(self, client, data_service, sample_application_payload):
        sample_application_payload["team"] = "Space"

        response = client.post("/api/applications", json=sample_application_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Invalid team"
        assert 'Team "Space" not found' in body["message"]
        assert body["details"]["availableTeams"] == ["Engineering", "Product", "Marketing"]
        assert data_service.get_all_applications() == []

    def test_missing_fields(self, client, data_service):
        response = client.post("/api/applications", json={"applicantName": "A"})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Missing required fields: applicantEmail, position, team"
        )
        assert data_service.get_all_applications() == []

    def test_invalid_email(self, client, sample_application_payload):
        sample_application_payload["applicantEmail"] = "sarah.example.com"

        response = client.post("/api/applications", json=sample_application_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email format"

    def test_malformed_body(self, client):
        response = client.post("/api/applications", json={"applicantName": ["not", "a", "string"]})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_client_cannot_set_status(self, client, sample_application_payload):
        sample_application_payload["status"] = "accepted"

        body = client.post("/api/applications", json=sample_application_payload).json()

        assert body["application"]["status"] == "pending"

    def test_multiline_name_still_notifies(self, client, data_service, sample_application_payload):
        """Test line breaks in header fields neither crash nor block the submission."""
        sample_application_payload["applicantName"] = "Sarah\nChen"
        sample_application_payload["position"] = "Backend\r\nEngineer"

        response = client.post("/api/applications", json=sample_application_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["application"]["applicantName"] == "Sarah\nChen"
        assert body["notification"]["sent"] is True
        assert body["notification"]["recipients"] == ["cto@company.com", "eng-lead@company.com"]
        assert len(data_service.get_all_applications()) == 1

    def test_email_failure_does_not_block_submission(self, client, data_service, email_service, sample_application_payload):
        """Test a transport failure is reported while the record is still saved."""
        email_service.send_application_notification = AsyncMock(
            return_value=SendResult(success=False, message="Connection refused", error="OSError()")
        )

        response = client.post("/api/applications", json=sample_application_payload)

        assert response.status_code == 201
        assert response.json()["notification"]["sent"] is False
        assert response.json()["notification"]["details"] == "Connection refused"
        assert len(data_service.get_all_applications()) == 1


# =============================================================================
# Listing and Lookup Tests
# =============================================================================

class TestListApplications:
    """Tests for GET /api/applications and GET /api/applications/{id}."""

    @pytest.fixture
    def seeded(self, data_service):
        rows = [
            ("Engineering", "pending"),
            ("engineering", "reviewing"),
            ("Product", "pending"),
        ]
        for team, status in rows:
            data_service.save_application(Application(
                applicant_name="A",
                applicant_email="a@b.com",
                position="X",
                team=team,
                status=status,
            ))
        return data_service

    def test_list_all(self, client, seeded):
        body = client.get("/api/applications").json()

        assert body["success"] is True
        assert body["count"] == 3
        assert len(body["applications"]) == 3

    def test_filter_by_team_case_insensitive(self, client, seeded):
        body = client.get("/api/applications", params={"team": "ENGINEERING"}).json()
        assert body["count"] == 2

    def test_filter_by_status(self, client, seeded):
        body = client.get("/api/applications", params={"status": "pending"}).json()
        assert body["count"] == 2

    def test_filter_by_team_and_status(self, client, seeded):
        body = client.get(
            "/api/applications",
            params={"team": "engineering", "status": "reviewing"},
        ).json()
        assert body["count"] == 1

    def test_get_unknown(self, client):
        response = client.get("/api/applications/nope")

        assert response.status_code == 404
        assert response.json()["error"] == "Application not found"


# =============================================================================
# Status Update Tests
# =============================================================================

class TestUpdateStatus:
    """Tests for PATCH /api/applications/{id}/status."""

    @pytest.fixture
    def application_id(self, client, sample_application_payload):
        return client.post("/api/applications", json=sample_application_payload).json()["application"]["id"]

    def test_update(self, client, application_id):
        response = client.patch(
            f"/api/applications/{application_id}/status",
            json={"status": "interview"},
        )

        assert response.status_code == 200
        assert response.json()["application"]["status"] == "interview"
        assert client.get(f"/api/applications/{application_id}").json()["application"]["status"] == "interview"

    def test_invalid_status_leaves_record_unchanged(self, client, data_service, application_id):
        response = client.patch(
            f"/api/applications/{application_id}/status",
            json={"status": "hired"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Status must be one of: pending, reviewing, interview, accepted, rejected"
        )
        assert data_service.get_application_by_id(application_id).status.value == "pending"

    def test_missing_status(self, client, application_id):
        response = client.patch(f"/api/applications/{application_id}/status", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Status is required"

    def test_unknown_id(self, client):
        response = client.patch("/api/applications/nope/status", json={"status": "accepted"})
        assert response.status_code == 404


# =============================================================================
# Stats Tests
# =============================================================================

class TestStatsSummary:
    """Tests for GET /api/applications/stats/summary."""

    def test_summary(self, client, data_service):
        now = utc_now()
        data_service.save_application(Application(
            applicant_name="A", applicant_email="a@b.com", position="X",
            team="Engineering", applied_at=now - timedelta(days=1),
        ))
        data_service.save_application(Application(
            applicant_name="B", applicant_email="b@b.com", position="Y",
            team="Product", applied_at=now - timedelta(days=30), status="accepted",
        ))

        body = client.get("/api/applications/stats/summary").json()

        assert body["success"] is True
        assert body["stats"] == {
            "total": 2,
            "byStatus": {"pending": 1, "accepted": 1},
            "byTeam": {"Engineering": 1, "Product": 1},
            "recent": 1,
        }
