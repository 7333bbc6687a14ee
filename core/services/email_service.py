# =============================================================================
# core/services/email_service.py - Application Notifications
# =============================================================================
# Composes application notifications and hands them to a NotificationSink.
# Delivery problems come back as SendResult(success=False, ...); nothing
# here raises to the caller, so a failed email never undoes a submission.
# =============================================================================

import logging
from email.message import EmailMessage

from app.exceptions import TransportError
from core.models.application import Application
from core.models.notification import SendResult
from lib.email_templates import build_html, build_subject, build_text
from lib.email_transport import NotificationSink

logger = logging.getLogger(__name__)


class EmailService:
    """
    Service for sending application notifications.

    Example:
        service = EmailService(ConsoleSink(), from_address="hiring@company.com",
                               app_name="Executive Hiring Notification System")
        result = await service.send_application_notification(application, recipients)
        if not result.success:
            ...
    """

    def __init__(
        self,
        sink: NotificationSink,
        from_address: str | None,
        app_name: str,
    ):
        self.sink = sink
        self.from_address = from_address
        self.app_name = app_name

    @property
    def is_configured(self) -> bool:
        """True when messages are actually delivered, not just logged."""
        return self.sink.configured

    async def send_application_notification(
        self,
        application: Application,
        recipients: list[str],
    ) -> SendResult:
        """
        Notify recipients about a new application.

        Args:
            application: The submitted application
            recipients: Ordered addresses (executives, then project leads)

        Returns:
            SendResult describing the attempt
        """
        return await self.send_email(
            to=recipients,
            subject=build_subject(application),
            text=build_text(application, self.app_name),
            html=build_html(application, self.app_name),
        )

    async def send_email(
        self,
        to: list[str],
        subject: str,
        text: str,
        html: str | None = None,
    ) -> SendResult:
        """Build a multipart message and deliver it through the sink."""
        try:
            message = self._build_message(to, subject, text, html)
        except ValueError as e:
            # Header values the email package refuses (e.g. embedded CR/LF)
            logger.error(f"Failed to compose email to {', '.join(to)}: {e}")
            return SendResult(
                success=False,
                message=f"Failed to compose email: {e}",
                error=repr(e),
            )

        try:
            message_id = await self.sink.deliver(message)
        except TransportError as e:
            logger.error(f"Failed to send email to {message['To']}: {e.message}")
            return SendResult(
                success=False,
                message=e.message,
                error=repr(e.cause) if e.cause else e.message,
            )

        if not self.is_configured:
            return SendResult(
                success=True,
                message="Email logged (transporter not configured)",
                message_id=message_id,
            )

        logger.info(f"Email sent successfully: {message_id}")
        return SendResult(
            success=True,
            message="Email sent successfully",
            message_id=message_id,
        )

    def _build_message(
        self,
        to: list[str],
        subject: str,
        text: str,
        html: str | None,
    ) -> EmailMessage:
        message = EmailMessage()
        if self.from_address:
            message["From"] = self.from_address
        message["To"] = ", ".join(to)
        message["Subject"] = subject
        message.set_content(text)
        if html:
            message.add_alternative(html, subtype="html")
        return message

    async def test_connection(self) -> SendResult:
        """Check that the transport is reachable."""
        try:
            status = await self.sink.verify()
        except TransportError as e:
            logger.warning(f"Email connection check failed: {e.message}")
            return SendResult(success=False, message=e.message)

        return SendResult(success=True, message=status)
