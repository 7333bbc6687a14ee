# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic records and payloads (Application, Team, SendResult)
# - services/: JSON file persistence and email notifications
#
# Route handling stays out of this package; errors are raised as the
# domain exceptions from app.exceptions and mapped to HTTP there.
# =============================================================================
