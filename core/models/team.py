# =============================================================================
# core/models/team.py - Team Schemas
# =============================================================================
# A team is a named group whose executives and project leads are notified
# whenever an application is submitted against it.
#
# Team names are unique case-insensitively; that rule is enforced by the
# routes against the store, not by the model.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.exceptions import ValidationError
from lib.utils import ensure_utc, generate_id, is_valid_email, utc_now


class Team(BaseModel):
    """
    A team that receives application notifications.

    Example:
        {
            "id": "engineering",
            "name": "Engineering",
            "description": "Software development and technical roles",
            "executives": ["cto@company.com"],
            "projectLeads": ["eng-lead@company.com"],
            "createdAt": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=generate_id)
    name: str | None = None
    description: str | None = None
    executives: list[str] = Field(default_factory=list)
    project_leads: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("id", mode="before")
    @classmethod
    def _default_blank_id(cls, value: Any) -> Any:
        return value or generate_id()

    @field_validator("executives", "project_leads", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def notification_emails(self) -> list[str]:
        """Executives first, then project leads. Duplicates are kept."""
        return [*self.executives, *self.project_leads]

    def validate(self) -> bool:
        """
        Check the name, that someone is notified, and every address.

        Raises:
            ValidationError: On the first problem found
        """
        if not (self.name and self.name.strip()):
            raise ValidationError(
                "Team name is required",
                details={"missingFields": ["name"]},
            )

        if not self.executives and not self.project_leads:
            raise ValidationError(
                "At least one executive or project lead email is required"
            )

        for email in self.notification_emails():
            if not is_valid_email(email):
                raise ValidationError(
                    f"Invalid email format: {email}",
                    details={"email": email},
                )

        return True

    def to_dict(self) -> dict[str, Any]:
        """camelCase JSON form, as persisted and returned by the API."""
        return self.model_dump(by_alias=True, mode="json")


class TeamPayload(BaseModel):
    """Body of POST /api/teams and PUT /api/teams/{id} (full replace)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Design",
                "description": "UX and visual design roles",
                "executives": ["cdo@company.com"],
                "projectLeads": ["design-lead@company.com"],
            }
        },
    )

    id: str | None = None
    name: str | None = None
    description: str | None = None
    executives: list[str] | None = None
    project_leads: list[str] | None = None

    def to_team(self, **overrides: Any) -> Team:
        data = self.model_dump(exclude_none=True)
        data.update({key: value for key, value in overrides.items() if value is not None})
        return Team(**data)


# Seeded into a fresh teams file; ids are the lowercase team names
DEFAULT_TEAMS: list[dict[str, Any]] = [
    {
        "id": "engineering",
        "name": "Engineering",
        "description": "Software development and technical roles",
        "executives": ["cto@company.com"],
        "project_leads": ["eng-lead@company.com"],
    },
    {
        "id": "product",
        "name": "Product",
        "description": "Product management and design roles",
        "executives": ["cpo@company.com"],
        "project_leads": ["product-lead@company.com"],
    },
    {
        "id": "marketing",
        "name": "Marketing",
        "description": "Marketing and growth roles",
        "executives": ["cmo@company.com"],
        "project_leads": ["marketing-lead@company.com"],
    },
]
