"""SMTP delivery and rendering of notification e-mails."""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import TYPE_CHECKING

from gympoint.logging import sanitize_for_log

if TYPE_CHECKING:
    from gympoint.config import Settings
    from gympoint.jobs.payloads import CancellationMailPayload, RegistrationMailPayload

logger = logging.getLogger(__name__)


@dataclass
class MailMessage:
    """A rendered plain-text e-mail."""

    to: str
    subject: str
    body: str


class Mailer:
    """Sends MailMessages through an SMTP server."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        user: str | None = None,
        password: str | None = None,
        use_tls: bool = False,
        timeout: float = 30.0,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.user = user
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> Mailer:
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            user=settings.smtp_user,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout,
        )

    def build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    def send(self, message: MailMessage) -> None:
        """Deliver a message. SMTP errors propagate to the caller.

        Args:
            message: The message to deliver.
        """
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.user:
                smtp.login(self.user, self.password or "")
            smtp.send_message(self.build(message))
        logger.info(
            "Sent '%s' to %s via %s:%s",
            message.subject,
            sanitize_for_log(message.to),
            self.host,
            self.port,
        )


def render_registration_mail(payload: RegistrationMailPayload) -> MailMessage:
    """Render the registration confirmation for a student."""
    body = (
        f"Hello {payload.student.name},\n\n"
        f"Your registration in the {payload.plan.title} plan is confirmed.\n\n"
        f"Duration: {payload.plan.duration} month(s)\n"
        f"Total price: {payload.price:.2f}\n"
        f"Valid until: {payload.formatted_end_date}\n\n"
        "Welcome to Gympoint!\n"
    )
    return MailMessage(
        to=payload.student.email,
        subject="Gympoint registration confirmed",
        body=body,
    )


def render_cancellation_mail(payload: CancellationMailPayload) -> MailMessage:
    """Render the cancellation notice for a student."""
    registration = payload.registration
    body = (
        f"Hello {registration.student.name},\n\n"
        f"Your registration in the {registration.plan.title} plan was cancelled "
        f"on {registration.cancelled_at:%d/%m/%Y at %H:%M}.\n\n"
        "If this was not requested by you, please contact the front desk.\n"
    )
    return MailMessage(
        to=registration.student.email,
        subject="Gympoint registration cancelled",
        body=body,
    )
