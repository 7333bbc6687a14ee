# =============================================================================
# app/routers/teams.py - Team Endpoints
# =============================================================================
# Team CRUD plus two email helpers:
# - POST /{id}/test-email: send a sample notification to the team
# - GET /email/status: check the mail transport
#
# Team names are unique case-insensitively.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import DataServiceDep, EmailServiceDep
from app.exceptions import ConflictError, TeamIdConflictError, TeamNotFoundError
from core.models.application import Application
from core.models.team import TeamPayload
from lib.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("")
async def list_teams(data_service: DataServiceDep):
    """List all teams."""
    teams = data_service.get_all_teams()

    return {
        "success": True,
        "count": len(teams),
        "teams": [t.to_dict() for t in teams],
    }


@router.get("/email/status")
async def email_status(email_service: EmailServiceDep):
    """
    Check the email transport.

    Reports unavailable when no SMTP server is configured.
    """
    result = await email_service.test_connection()

    return {
        "success": True,
        "configured": email_service.is_configured,
        "emailService": result.to_dict(),
    }


@router.get("/{team_id}")
async def get_team(
    team_id: Annotated[str, Path(description="Team ID")],
    data_service: DataServiceDep,
):
    """Get one team by ID."""
    team = data_service.get_team_by_id(team_id)

    if team is None:
        raise TeamNotFoundError(team_id)

    return {
        "success": True,
        "team": team.to_dict(),
    }


@router.post("", status_code=201)
async def create_team(
    request: TeamPayload,
    data_service: DataServiceDep,
):
    """
    Create a team.

    Rejected if another team already has the same name (ignoring case),
    or the body names an ID that is already taken.
    """
    team = request.to_team()
    team.validate()

    existing = data_service.get_team_by_name(team.name)
    if existing is not None:
        raise ConflictError(team.name, existing.id)

    if data_service.get_team_by_id(team.id) is not None:
        raise TeamIdConflictError(team.id)

    saved = data_service.save_team(team)
    logger.info(f"New team created: {saved.name}")

    return {
        "success": True,
        "message": "Team created successfully",
        "team": saved.to_dict(),
    }


@router.put("/{team_id}")
async def update_team(
    team_id: Annotated[str, Path(description="Team ID")],
    request: TeamPayload,
    data_service: DataServiceDep,
):
    """
    Replace a team.

    The ID and creation time are kept; everything else comes from the body.
    """
    existing = data_service.get_team_by_id(team_id)
    if existing is None:
        raise TeamNotFoundError(team_id)

    team = request.to_team(id=team_id, created_at=existing.created_at)
    team.validate()

    same_name = data_service.get_team_by_name(team.name)
    if same_name is not None and same_name.id != team_id:
        raise ConflictError(team.name, same_name.id)

    saved = data_service.save_team(team)
    logger.info(f"Team updated: {saved.name}")

    return {
        "success": True,
        "message": "Team updated successfully",
        "team": saved.to_dict(),
    }


@router.delete("/{team_id}")
async def delete_team(
    team_id: Annotated[str, Path(description="Team ID")],
    data_service: DataServiceDep,
):
    """
    Delete a team.

    Applications submitted to the team keep their team name.
    """
    data_service.delete_team(team_id)

    return {
        "success": True,
        "message": "Team deleted successfully",
    }


@router.post("/{team_id}/test-email")
async def send_test_email(
    team_id: Annotated[str, Path(description="Team ID")],
    data_service: DataServiceDep,
    email_service: EmailServiceDep,
):
    """Send a sample application notification to the team's recipients."""
    team = data_service.get_team_by_id(team_id)
    if team is None:
        raise TeamNotFoundError(team_id)

    sample = Application(
        applicant_name="Test Applicant",
        applicant_email="test@example.com",
        position="Test Position",
        team=team.name,
        applied_at=utc_now(),
        cover_letter="This is a test email notification to verify the email system is working correctly.",
        resume_url="https://example.com/test-resume.pdf",
    )

    recipients = team.notification_emails()
    result = await email_service.send_application_notification(sample, recipients)
    logger.info(f"Test email for team {team.name}: sent={result.success}")

    return {
        "success": True,
        "message": "Test email sent successfully" if result.success else "Test email failed",
        "recipients": recipients,
        "emailResult": result.to_dict(),
    }
