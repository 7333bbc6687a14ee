# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable helpers:
# - utils.py: Identifier generation, email pattern check, UTC clock
# - email_templates.py: Subject/HTML/text bodies for application notifications
# - email_transport.py: Notification sinks (SMTP via aiosmtplib, console log)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import generate_id, is_valid_email, utc_now

__all__ = [
    "generate_id",
    "is_valid_email",
    "utc_now",
]
