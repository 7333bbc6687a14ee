# =============================================================================
# core/services/data_service.py - JSON File Persistence
# =============================================================================
# Stores applications and teams as two JSON arrays on local disk.
# Every mutation is a full read-modify-write of one file.
#
# No locking: two overlapping writes to the same file can interleave and
# the later one wins. Request volume is assumed to be low.
# =============================================================================

import json
import logging
from collections import Counter
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ApplicationNotFoundError, StorageError, TeamNotFoundError
from core.models.application import Application, ApplicationStatus
from core.models.team import DEFAULT_TEAMS, Team
from lib.utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

APPLICATIONS_FILENAME = "applications.json"
TEAMS_FILENAME = "teams.json"


class DataService:
    """
    File-backed store for applications and teams.

    Constructed once at startup and shared by all requests.

    Example:
        store = DataService("data")
        team = store.get_team_by_name("engineering")
        store.save_application(Application(...))
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self.applications_file = self.data_dir / APPLICATIONS_FILENAME
        self.teams_file = self.data_dir / TEAMS_FILENAME
        self.initialize()

    # -------------------------------------------------------------------------
    # File Handling
    # -------------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Ensure the data directory and both collection files exist.

        A newly created teams file is seeded with the default teams.
        Existing files are never touched.
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)

        if not self.applications_file.exists():
            self._write(self.applications_file, [])
            logger.info(f"Created {self.applications_file}")

        if not self.teams_file.exists():
            defaults = [Team(**team).to_dict() for team in DEFAULT_TEAMS]
            self._write(self.teams_file, defaults)
            logger.info(f"Seeded {self.teams_file} with {len(defaults)} default teams")

        logger.info(f"Data service initialized at {self.data_dir}")

    def _read(self, path: Path, model: type[ModelT]) -> list[ModelT]:
        """
        Load a whole collection.

        Any read or parse failure is logged and treated as an empty
        collection; callers never see the error.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [model.model_validate(item) for item in data]
        except (OSError, ValueError, PydanticValidationError) as e:
            logger.error(f"Error reading {path.name}: {e}")
            return []

    def _write(self, path: Path, records: list[dict[str, Any]]) -> None:
        """Overwrite a collection file with the given records."""
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write {path.name}: {e}")
            raise StorageError(str(path), str(e))

    # -------------------------------------------------------------------------
    # Applications
    # -------------------------------------------------------------------------

    def get_all_applications(self) -> list[Application]:
        return self._read(self.applications_file, Application)

    def get_application_by_id(self, application_id: str) -> Application | None:
        for application in self.get_all_applications():
            if application.id == application_id:
                return application
        return None

    def save_application(self, application: Application) -> Application:
        """Append an application to the collection."""
        applications = self.get_all_applications()
        applications.append(application)
        self._write(self.applications_file, [a.to_dict() for a in applications])
        logger.info(f"Saved application {application.id} ({application.applicant_name})")
        return application

    def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> Application:
        """
        Set the status of one application.

        Raises:
            ApplicationNotFoundError: If no application has this ID
        """
        applications = self.get_all_applications()

        for application in applications:
            if application.id == application_id:
                application.status = ApplicationStatus(status)
                self._write(self.applications_file, [a.to_dict() for a in applications])
                logger.info(f"Application {application_id} status -> {application.status.value}")
                return application

        raise ApplicationNotFoundError(application_id)

    def get_recent_applications(
        self,
        days: int = 7,
        now: datetime | None = None,
    ) -> list[Application]:
        """Applications submitted at or after `now - days`."""
        cutoff = ensure_utc(now or utc_now()) - timedelta(days=days)
        return [a for a in self.get_all_applications() if a.applied_at >= cutoff]

    def get_application_stats(self, now: datetime | None = None) -> dict[str, Any]:
        """
        Summary counts over all applications.

        Returns:
            {"total": int, "byStatus": {...}, "byTeam": {...}, "recent": int}
            where `recent` counts the trailing 7 days, boundary included.
        """
        applications = self.get_all_applications()
        cutoff = ensure_utc(now or utc_now()) - timedelta(days=7)

        return {
            "total": len(applications),
            "byStatus": dict(Counter(a.status.value for a in applications)),
            "byTeam": dict(Counter(a.team for a in applications)),
            "recent": sum(1 for a in applications if a.applied_at >= cutoff),
        }

    # -------------------------------------------------------------------------
    # Teams
    # -------------------------------------------------------------------------

    def get_all_teams(self) -> list[Team]:
        return self._read(self.teams_file, Team)

    def get_team_by_id(self, team_id: str) -> Team | None:
        for team in self.get_all_teams():
            if team.id == team_id:
                return team
        return None

    def get_team_by_name(self, name: str | None) -> Team | None:
        """Case-insensitive exact name lookup."""
        if not name:
            return None
        wanted = name.lower()
        for team in self.get_all_teams():
            if team.name and team.name.lower() == wanted:
                return team
        return None

    def save_team(self, team: Team) -> Team:
        """Insert a team, or replace the one with the same ID."""
        teams = self.get_all_teams()

        for index, existing in enumerate(teams):
            if existing.id == team.id:
                teams[index] = team
                break
        else:
            teams.append(team)

        self._write(self.teams_file, [t.to_dict() for t in teams])
        logger.info(f"Saved team {team.id} ({team.name})")
        return team

    def delete_team(self, team_id: str) -> None:
        """
        Remove a team by ID.

        Applications that reference the team by name are left as they are.

        Raises:
            TeamNotFoundError: If no team has this ID
        """
        teams = self.get_all_teams()
        remaining = [t for t in teams if t.id != team_id]

        if len(remaining) == len(teams):
            raise TeamNotFoundError(team_id)

        self._write(self.teams_file, [t.to_dict() for t in remaining])
        logger.info(f"Deleted team {team_id}")
