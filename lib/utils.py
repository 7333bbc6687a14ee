# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - Record identifier generation
# - Email address pattern check
# - UTC clock helpers
# =============================================================================

import re
import time
from datetime import datetime, timezone
from uuid import uuid4


# Non-whitespace local part, exactly one "@", at least one "." in the domain
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# Identifier Utilities
# =============================================================================

def _to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_id() -> str:
    """
    Generate an opaque record identifier.

    Millisecond timestamp in base 36 followed by a random suffix.
    Uniqueness is best-effort; nothing checks for collisions.

    Example:
        generate_id()  # "mgx1k2p0a1b2c3d4e5f"
    """
    return _to_base36(int(time.time() * 1000)) + uuid4().hex[:11]


# =============================================================================
# Email Utilities
# =============================================================================

def is_valid_email(value: str | None) -> bool:
    """Check an address against the simple local@domain.tld pattern."""
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
