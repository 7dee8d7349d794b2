"""Unit tests for e-mail rendering and SMTP delivery."""

from unittest.mock import MagicMock, patch

import pytest

from gympoint.config import Settings
from gympoint.jobs.mail import (
    Mailer,
    MailMessage,
    render_cancellation_mail,
    render_registration_mail,
)
from gympoint.jobs.payloads import CancellationMailPayload, RegistrationMailPayload

REGISTRATION_PAYLOAD = {
    "student": {"id": 1, "name": "Ana Souza", "email": "ana@example.com"},
    "plan": {"id": 2, "title": "Gold", "duration": 3, "price": "100.00"},
    "price": "300.00",
    "formatted_end_date": "10/04/2024",
}

CANCELLATION_PAYLOAD = {
    "registration": {
        "id": 5,
        "student_id": 1,
        "plan_id": 2,
        "start_date": "2024-01-10T10:00:00",
        "end_date": "2024-04-10T10:00:00",
        "price": "300.00",
        "cancelled_at": "2024-01-05T14:30:00",
        "student": {"name": "Ana Souza", "email": "ana@example.com"},
        "plan": {"title": "Gold"},
    }
}


@pytest.mark.unit
class TestRender:
    def test_registration_mail(self) -> None:
        message = render_registration_mail(
            RegistrationMailPayload.model_validate(REGISTRATION_PAYLOAD)
        )

        assert message.to == "ana@example.com"
        assert "confirmed" in message.subject
        assert "Hello Ana Souza" in message.body
        assert "Gold" in message.body
        assert "300.00" in message.body
        assert "10/04/2024" in message.body

    def test_cancellation_mail(self) -> None:
        message = render_cancellation_mail(
            CancellationMailPayload.model_validate(CANCELLATION_PAYLOAD)
        )

        assert message.to == "ana@example.com"
        assert "cancelled" in message.subject
        assert "Gold" in message.body
        assert "05/01/2024 at 14:30" in message.body


@pytest.mark.unit
class TestMailer:
    def test_from_settings(self) -> None:
        settings = Settings(
            smtp_host="smtp.example.com",
            smtp_port=587,
            smtp_user="mailer",
            smtp_password="secret",
            smtp_use_tls=True,
            mail_from="Gym <gym@example.com>",
        )

        mailer = Mailer.from_settings(settings)

        assert mailer.host == "smtp.example.com"
        assert mailer.port == 587
        assert mailer.user == "mailer"
        assert mailer.use_tls is True
        assert mailer.sender == "Gym <gym@example.com>"

    def test_build_sets_headers(self) -> None:
        mailer = Mailer(host="localhost", port=25, sender="gym@example.com")

        email = mailer.build(MailMessage(to="ana@example.com", subject="Hi", body="Body"))

        assert email["From"] == "gym@example.com"
        assert email["To"] == "ana@example.com"
        assert email["Subject"] == "Hi"
        assert email.get_content().strip() == "Body"

    def test_send_plain(self) -> None:
        mailer = Mailer(host="localhost", port=1025, sender="gym@example.com")

        with patch("gympoint.jobs.mail.smtplib.SMTP") as smtp_cls:
            smtp = smtp_cls.return_value.__enter__.return_value
            mailer.send(MailMessage(to="ana@example.com", subject="Hi", body="Body"))

        smtp_cls.assert_called_once_with("localhost", 1025, timeout=30.0)
        smtp.starttls.assert_not_called()
        smtp.login.assert_not_called()
        smtp.send_message.assert_called_once()
        sent = smtp.send_message.call_args.args[0]
        assert sent["To"] == "ana@example.com"

    def test_send_with_tls_and_login(self) -> None:
        mailer = Mailer(
            host="smtp.example.com",
            port=587,
            sender="gym@example.com",
            user="mailer",
            password="secret",
            use_tls=True,
        )

        with patch("gympoint.jobs.mail.smtplib.SMTP") as smtp_cls:
            smtp: MagicMock = smtp_cls.return_value.__enter__.return_value
            mailer.send(MailMessage(to="ana@example.com", subject="Hi", body="Body"))

        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("mailer", "secret")
