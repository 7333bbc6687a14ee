# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check and root info endpoints
# - applications.py: Application submission, listing, status and stats
# - teams.py: Team CRUD, test emails and email transport status
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import applications
from . import teams

__all__ = [
    "health",
    "applications",
    "teams",
]
