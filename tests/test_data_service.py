# =============================================================================
# tests/test_data_service.py - JSON Store Tests
# =============================================================================
# Tests for DataService against a temporary directory:
# - Initialization and default team seeding
# - Degrade-to-empty on unreadable files
# - Application append, lookup, status updates, stats
# - Team lookup, upsert and delete
# =============================================================================

import json
from datetime import datetime, timedelta, timezone

import pytest

from app.exceptions import ApplicationNotFoundError, TeamNotFoundError
from core.models import Application, ApplicationStatus, Team
from core.services.data_service import DataService


def make_application(**overrides) -> Application:
    data = {
        "applicant_name": "Sarah Chen",
        "applicant_email": "sarah@example.com",
        "position": "Engineer",
        "team": "Engineering",
    }
    data.update(overrides)
    return Application(**data)


# =============================================================================
# Initialization Tests
# =============================================================================

class TestInitialization:
    """Tests for file creation and seeding."""

    def test_creates_files(self, data_dir):
        DataService(data_dir)

        assert json.loads((data_dir / "applications.json").read_text()) == []
        assert (data_dir / "teams.json").exists()

    def test_seeds_default_teams(self, data_service):
        teams = data_service.get_all_teams()

        assert [t.name for t in teams] == ["Engineering", "Product", "Marketing"]
        assert [t.id for t in teams] == ["engineering", "product", "marketing"]
        for team in teams:
            assert len(team.executives) == 1
            assert len(team.project_leads) == 1

    def test_does_not_reseed_existing_file(self, data_dir, data_service):
        """Test that a second start keeps whatever the teams file holds."""
        data_service.delete_team("product")

        DataService(data_dir)

        assert [t.id for t in data_service.get_all_teams()] == ["engineering", "marketing"]

    def test_teams_file_is_human_readable(self, data_dir, data_service):
        raw = (data_dir / "teams.json").read_text()
        assert '\n  {' in raw
        assert '"projectLeads"' in raw


# =============================================================================
# Read Failure Tests
# =============================================================================

class TestReadFailures:
    """Unreadable collections degrade to empty lists."""

    def test_corrupt_json(self, data_dir, data_service):
        (data_dir / "applications.json").write_text("{not json")
        assert data_service.get_all_applications() == []

    def test_not_a_list(self, data_dir, data_service):
        (data_dir / "teams.json").write_text('{"id": "x"}')
        assert data_service.get_all_teams() == []

    def test_missing_file(self, data_dir, data_service):
        (data_dir / "applications.json").unlink()
        assert data_service.get_all_applications() == []
        assert data_service.get_application_by_id("anything") is None


# =============================================================================
# Application Tests
# =============================================================================

class TestApplications:
    """Tests for application persistence."""

    def test_save_and_get_by_id(self, data_service):
        saved = data_service.save_application(make_application())

        fetched = data_service.get_application_by_id(saved.id)

        assert fetched is not None
        assert fetched.id == saved.id
        assert fetched.applicant_name == "Sarah Chen"
        assert fetched.applied_at == saved.applied_at

    def test_save_appends(self, data_service):
        first = data_service.save_application(make_application(applicant_name="One"))
        second = data_service.save_application(make_application(applicant_name="Two"))

        ids = [a.id for a in data_service.get_all_applications()]

        assert ids == [first.id, second.id]

    def test_stored_as_camel_case(self, data_dir, data_service):
        data_service.save_application(make_application())

        stored = json.loads((data_dir / "applications.json").read_text())

        assert stored[0]["applicantEmail"] == "sarah@example.com"
        assert stored[0]["status"] == "pending"

    def test_get_unknown_id(self, data_service):
        assert data_service.get_application_by_id("missing") is None

    def test_update_status(self, data_service):
        saved = data_service.save_application(make_application())

        updated = data_service.update_application_status(saved.id, ApplicationStatus.INTERVIEW)

        assert updated.status == ApplicationStatus.INTERVIEW
        assert data_service.get_application_by_id(saved.id).status == ApplicationStatus.INTERVIEW

    def test_update_status_unknown_id(self, data_service):
        with pytest.raises(ApplicationNotFoundError):
            data_service.update_application_status("missing", ApplicationStatus.ACCEPTED)


# =============================================================================
# Stats Tests
# =============================================================================

class TestStats:
    """Tests for summary counts and the trailing 7-day window."""

    NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)

    def test_empty(self, data_service):
        assert data_service.get_application_stats(now=self.NOW) == {
            "total": 0,
            "byStatus": {},
            "byTeam": {},
            "recent": 0,
        }

    def test_counts(self, data_service):
        data_service.save_application(make_application(team="Engineering", applied_at=self.NOW))
        data_service.save_application(make_application(team="engineering", applied_at=self.NOW))
        third = data_service.save_application(make_application(team="Product", applied_at=self.NOW))
        data_service.update_application_status(third.id, ApplicationStatus.REJECTED)

        stats = data_service.get_application_stats(now=self.NOW)

        assert stats["total"] == 3
        assert stats["byStatus"] == {"pending": 2, "rejected": 1}
        # Team counts use the submitted casing
        assert stats["byTeam"] == {"Engineering": 1, "engineering": 1, "Product": 1}

    def test_recent_includes_boundary(self, data_service):
        """Test that exactly 7 days ago counts, a second earlier doesn't."""
        boundary = self.NOW - timedelta(days=7)
        data_service.save_application(make_application(applied_at=boundary))
        data_service.save_application(make_application(applied_at=boundary - timedelta(seconds=1)))
        data_service.save_application(make_application(applied_at=self.NOW - timedelta(days=1)))

        assert data_service.get_application_stats(now=self.NOW)["recent"] == 2
        assert len(data_service.get_recent_applications(days=7, now=self.NOW)) == 2

    def test_recent_window_size(self, data_service):
        data_service.save_application(make_application(applied_at=self.NOW - timedelta(days=20)))
        data_service.save_application(make_application(applied_at=self.NOW - timedelta(days=2)))

        assert len(data_service.get_recent_applications(days=1, now=self.NOW)) == 0
        assert len(data_service.get_recent_applications(days=30, now=self.NOW)) == 2


# =============================================================================
# Team Tests
# =============================================================================

class TestTeams:
    """Tests for team persistence."""

    def test_get_by_id(self, data_service):
        assert data_service.get_team_by_id("product").name == "Product"
        assert data_service.get_team_by_id("nope") is None

    @pytest.mark.parametrize("name", ["engineering", "ENGINEERING", "Engineering"])
    def test_get_by_name_case_insensitive(self, data_service, name):
        assert data_service.get_team_by_name(name).id == "engineering"

    def test_get_by_name_exact_match_only(self, data_service):
        assert data_service.get_team_by_name("Engineer") is None
        assert data_service.get_team_by_name("") is None
        assert data_service.get_team_by_name(None) is None

    def test_save_new_team(self, data_service):
        team = Team(name="Design", executives=["cdo@company.com"])

        data_service.save_team(team)

        assert data_service.get_team_by_id(team.id).name == "Design"
        assert len(data_service.get_all_teams()) == 4

    def test_save_replaces_same_id(self, data_service):
        """Test upsert keeps position and count."""
        data_service.save_team(Team(id="product", name="Product & Design", executives=["cpo@company.com"]))

        teams = data_service.get_all_teams()

        assert len(teams) == 3
        assert teams[1].name == "Product & Design"

    def test_delete(self, data_service):
        data_service.delete_team("marketing")
        assert data_service.get_team_by_id("marketing") is None

    def test_delete_unknown_leaves_file_unchanged(self, data_dir, data_service):
        before = (data_dir / "teams.json").read_bytes()

        with pytest.raises(TeamNotFoundError):
            data_service.delete_team("missing")

        assert (data_dir / "teams.json").read_bytes() == before

    def test_delete_does_not_touch_applications(self, data_service):
        saved = data_service.save_application(make_application(team="Marketing"))

        data_service.delete_team("marketing")

        assert data_service.get_application_by_id(saved.id).team == "Marketing"
