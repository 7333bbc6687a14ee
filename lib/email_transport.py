# =============================================================================
# lib/email_transport.py - Notification Sinks
# =============================================================================
# Outbound delivery behind one small interface:
# - SmtpSink: real delivery through aiosmtplib
# - ConsoleSink: logs the message instead of sending it
#
# build_sink() picks one at startup from settings, so the rest of the code
# never checks whether mail is configured.
#
# Usage:
#   sink = build_sink(settings)
#   message_id = await sink.deliver(message)
# =============================================================================

import logging
import time
from abc import ABC, abstractmethod
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

from app.config import Settings
from app.exceptions import TransportError

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465


class NotificationSink(ABC):
    """Where composed notification emails go."""

    #: False for sinks that only pretend to deliver
    configured: bool = True

    @abstractmethod
    async def deliver(self, message: EmailMessage) -> str:
        """
        Deliver one message.

        Returns:
            The message id

        Raises:
            TransportError: If delivery fails
        """

    @abstractmethod
    async def verify(self) -> str:
        """
        Check the transport is reachable and accepts our credentials.

        Returns:
            A human-readable status line

        Raises:
            TransportError: If the transport is unavailable
        """


class SmtpSink(NotificationSink):
    """Delivers over SMTP with authentication (STARTTLS, or TLS on port 465)."""

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str,
        password: str,
        timeout: float = 30.0,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @property
    def _tls_options(self) -> dict[str, bool]:
        if self.port == IMPLICIT_TLS_PORT:
            return {"use_tls": True, "start_tls": False}
        return {"use_tls": False, "start_tls": True}

    async def deliver(self, message: EmailMessage) -> str:
        if "Message-ID" not in message:
            message["Message-ID"] = make_msgid()
        message_id = message["Message-ID"]

        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                timeout=self.timeout,
                **self._tls_options,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise TransportError(str(e) or type(e).__name__, cause=e) from e

        return message_id

    async def verify(self) -> str:
        client = aiosmtplib.SMTP(
            hostname=self.hostname,
            port=self.port,
            timeout=self.timeout,
            **self._tls_options,
        )
        try:
            await client.connect()
            await client.login(self.username, self.password)
            await client.quit()
        except (aiosmtplib.SMTPException, OSError) as e:
            raise TransportError(str(e) or type(e).__name__, cause=e) from e

        return "Email service connection successful"


class ConsoleSink(NotificationSink):
    """Logs messages instead of sending them. Used when SMTP isn't configured."""

    configured = False

    async def deliver(self, message: EmailMessage) -> str:
        body = message.get_body(preferencelist=("plain",))
        text = body.get_content() if body is not None else ""

        logger.info(
            "EMAIL NOTIFICATION (not sent - no transporter configured)\n"
            f"To: {message['To']}\n"
            f"Subject: {message['Subject']}\n"
            f"Content:\n{text}\n---"
        )
        return f"mock-{int(time.time() * 1000)}"

    async def verify(self) -> str:
        raise TransportError("Email transporter not configured")


def build_sink(settings: Settings) -> NotificationSink:
    """SmtpSink when host and credentials are all set, else ConsoleSink."""
    if not settings.email_configured:
        logger.warning("Email configuration not found. Email notifications will be logged only.")
        return ConsoleSink()

    logger.info(f"Email transport: {settings.EMAIL_HOST}:{settings.EMAIL_PORT}")
    return SmtpSink(
        hostname=settings.EMAIL_HOST,
        port=settings.EMAIL_PORT,
        username=settings.EMAIL_USER,
        password=settings.EMAIL_PASS,
        timeout=settings.EMAIL_TIMEOUT,
    )
