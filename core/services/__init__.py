# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .data_service import DataService
from .email_service import EmailService

__all__ = [
    "DataService",
    "EmailService",
]
