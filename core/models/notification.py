# =============================================================================
# core/models/notification.py - Notification Result Schemas
# =============================================================================
# - SendResult: What a delivery attempt produced (never raised, always returned)
# - NotificationOutcome: The `notification` block of a submission response
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SendResult(BaseModel):
    """
    Outcome of one email send.

    Callers must inspect `success`; delivery failures are reported here
    rather than raised.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    message: str
    message_id: str | None = Field(
        default=None,
        description="Transport message id, or mock-<millis> when only logged"
    )
    error: str | None = Field(
        default=None,
        description="Underlying transport error when success is false"
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class NotificationOutcome(BaseModel):
    """Summary of the notification sent for a submitted application."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sent: bool
    recipients: list[str]
    details: str
    message_id: str | None = None

    @classmethod
    def from_result(cls, result: SendResult, recipients: list[str]) -> "NotificationOutcome":
        return cls(
            sent=result.success,
            recipients=recipients,
            details=result.message,
            message_id=result.message_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
