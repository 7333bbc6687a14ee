# =============================================================================
# core/models/application.py - Job Application Schemas
# =============================================================================
# These models define the application record and its request payloads:
# - ApplicationStatus: Enum for the review lifecycle
# - Application: The persisted record (stored as camelCase JSON)
# - ApplicationCreate: Body of POST /api/applications
# - StatusUpdate: Body of PATCH /api/applications/{id}/status
#
# An application is tied to exactly one team by name. It is created on
# submission, changed only through status transitions, and never deleted.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.exceptions import ValidationError
from lib.utils import ensure_utc, generate_id, is_valid_email, utc_now


class ApplicationStatus(str, Enum):
    """
    Review states for an application.

    Flow: pending -> reviewing -> interview -> accepted | rejected
    (transitions are not enforced; any state may be set directly)
    """
    PENDING = "pending"
    REVIEWING = "reviewing"
    INTERVIEW = "interview"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


class Application(BaseModel):
    """
    A job application submitted against a team.

    Required fields are typed as optional so that `validate()` can report
    every missing one in a single message.

    Example:
        {
            "id": "mgx1k2p0a1b2c3d4e5f",
            "applicantName": "Sarah Chen",
            "applicantEmail": "sarah.chen@example.com",
            "position": "Senior Full Stack Developer",
            "team": "Engineering",
            "resumeUrl": "https://example.com/sarah-resume.pdf",
            "coverLetter": "I have 6 years of experience...",
            "appliedAt": "2024-01-15T10:30:00Z",
            "status": "pending"
        }
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=generate_id)
    applicant_name: str | None = None
    applicant_email: str | None = None
    position: str | None = None
    # Kept exactly as submitted; matched to a Team case-insensitively
    team: str | None = None
    resume_url: str | None = None
    cover_letter: str | None = None
    applied_at: datetime = Field(default_factory=utc_now)
    status: ApplicationStatus = ApplicationStatus.PENDING

    @field_validator("id", mode="before")
    @classmethod
    def _default_blank_id(cls, value: Any) -> Any:
        return value or generate_id()

    @field_validator("applied_at")
    @classmethod
    def _normalize_applied_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def validate(self) -> bool:
        """
        Check required fields and the applicant email format.

        Raises:
            ValidationError: Naming every missing field, or the bad email
        """
        required = {
            "applicantName": self.applicant_name,
            "applicantEmail": self.applicant_email,
            "position": self.position,
            "team": self.team,
        }
        missing = [name for name, value in required.items() if not (value and value.strip())]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                details={"missingFields": missing},
            )

        if not is_valid_email(self.applicant_email):
            raise ValidationError(
                "Invalid email format",
                details={"applicantEmail": self.applicant_email},
            )

        return True

    def to_dict(self) -> dict[str, Any]:
        """camelCase JSON form, as persisted and returned by the API."""
        return self.model_dump(by_alias=True, mode="json")


class ApplicationCreate(BaseModel):
    """
    Payload for submitting an application.

    Server-side fields (appliedAt, status) are not accepted from clients.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "applicantName": "Sarah Chen",
                "applicantEmail": "sarah.chen@example.com",
                "position": "Senior Full Stack Developer",
                "team": "Engineering",
                "resumeUrl": "https://example.com/sarah-resume.pdf",
                "coverLetter": "I have 6 years of experience in React and Node.js.",
            }
        },
    )

    id: str | None = None
    applicant_name: str | None = None
    applicant_email: str | None = None
    position: str | None = None
    team: str | None = None
    resume_url: str | None = None
    cover_letter: str | None = None

    def to_application(self) -> Application:
        return Application(**self.model_dump(exclude_none=True))


class StatusUpdate(BaseModel):
    """
    Payload for a status transition.

    Left as a plain string so an out-of-range value gets the API's own
    error message instead of a generic schema error.
    """
    status: str | None = Field(
        default=None,
        examples=["reviewing"],
        description="One of: pending, reviewing, interview, accepted, rejected"
    )
