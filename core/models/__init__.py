# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for records and payloads:
# - application.py: Application record, submission and status payloads
# - team.py: Team record, create/update payload, default teams
# - notification.py: Email send results
#
# Records serialize to camelCase JSON, which is both the on-disk format
# and the API contract.
# =============================================================================

# -----------------------------------------------------------------------------
# Application Models
# -----------------------------------------------------------------------------
from .application import (
    Application,
    ApplicationCreate,
    ApplicationStatus,
    StatusUpdate,
)

# -----------------------------------------------------------------------------
# Team Models
# -----------------------------------------------------------------------------
from .team import (
    DEFAULT_TEAMS,
    Team,
    TeamPayload,
)

# -----------------------------------------------------------------------------
# Notification Models
# -----------------------------------------------------------------------------
from .notification import (
    NotificationOutcome,
    SendResult,
)

__all__ = [
    # Application
    "Application",
    "ApplicationCreate",
    "ApplicationStatus",
    "StatusUpdate",
    # Team
    "DEFAULT_TEAMS",
    "Team",
    "TeamPayload",
    # Notification
    "NotificationOutcome",
    "SendResult",
]
