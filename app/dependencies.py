# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared services.
# The services are built once in the app lifespan and kept on app.state;
# route handlers receive them through Depends(), and tests override these
# accessors with their own instances.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.data_service import DataService
from core.services.email_service import EmailService


def get_data_service(request: Request) -> DataService:
    """Get the process-wide DataService."""
    return request.app.state.data_service


def get_email_service(request: Request) -> EmailService:
    """Get the process-wide EmailService."""
    return request.app.state.email_service


# Type aliases for dependency injection
DataServiceDep = Annotated[DataService, Depends(get_data_service)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]
