# =============================================================================
# app/routers/applications.py - Application Endpoints
# =============================================================================
# Submission, listing, lookup, status transitions and summary stats.
#
# Submission flow:
#   validate -> resolve team by name -> persist -> notify team -> 201
# A failed notification is reported in the response, never as an error.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import DataServiceDep, EmailServiceDep
from app.exceptions import ApplicationNotFoundError, InvalidStatusError, InvalidTeamError
from core.models.application import ApplicationCreate, ApplicationStatus, StatusUpdate
from core.models.notification import NotificationOutcome

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("", status_code=201)
async def submit_application(
    request: ApplicationCreate,
    data_service: DataServiceDep,
    email_service: EmailServiceDep,
):
    """
    Submit a new application.

    The team is matched case-insensitively, but the application keeps the
    team name exactly as submitted. The team's executives and project leads
    are emailed about the new application.
    """
    application = request.to_application()
    application.validate()

    team = data_service.get_team_by_name(application.team)
    if team is None:
        available = [t.name for t in data_service.get_all_teams()]
        raise InvalidTeamError(application.team, available)

    saved = data_service.save_application(application)

    recipients = team.notification_emails()
    result = await email_service.send_application_notification(saved, recipients)

    logger.info(
        f"Application notification for {saved.applicant_name} ({saved.position}) "
        f"to team {team.name}: sent={result.success}, recipients={', '.join(recipients)}"
    )

    return {
        "success": True,
        "message": "Application submitted successfully",
        "application": saved.to_dict(),
        "notification": NotificationOutcome.from_result(result, recipients).to_dict(),
    }


@router.get("")
async def list_applications(
    data_service: DataServiceDep,
    team: Annotated[str | None, Query(description="Team name (case-insensitive)")] = None,
    status: Annotated[str | None, Query(description="Exact status value")] = None,
):
    """
    List applications, optionally filtered by team and/or status.
    """
    applications = data_service.get_all_applications()

    if team:
        wanted = team.lower()
        applications = [a for a in applications if (a.team or "").lower() == wanted]

    if status:
        applications = [a for a in applications if a.status.value == status]

    return {
        "success": True,
        "count": len(applications),
        "applications": [a.to_dict() for a in applications],
    }


@router.get("/stats/summary")
async def application_stats(data_service: DataServiceDep):
    """
    Summary counts: total, per status, per team, and submitted in the last 7 days.
    """
    return {
        "success": True,
        "stats": data_service.get_application_stats(),
    }


@router.get("/{application_id}")
async def get_application(
    application_id: Annotated[str, Path(description="Application ID")],
    data_service: DataServiceDep,
):
    """Get one application by ID."""
    application = data_service.get_application_by_id(application_id)

    if application is None:
        raise ApplicationNotFoundError(application_id)

    return {
        "success": True,
        "application": application.to_dict(),
    }


@router.patch("/{application_id}/status")
async def update_application_status(
    application_id: Annotated[str, Path(description="Application ID")],
    request: StatusUpdate,
    data_service: DataServiceDep,
):
    """
    Move an application to another status.

    Status must be one of: pending, reviewing, interview, accepted, rejected.
    """
    allowed = ApplicationStatus.values()
    if not request.status or request.status not in allowed:
        raise InvalidStatusError(request.status or None, allowed)

    application = data_service.update_application_status(
        application_id,
        ApplicationStatus(request.status),
    )

    return {
        "success": True,
        "message": "Application status updated successfully",
        "application": application.to_dict(),
    }
