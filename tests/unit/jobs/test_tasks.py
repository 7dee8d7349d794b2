"""Unit tests for the mail Celery tasks."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from gympoint.jobs import CANCELLATION_MAIL, REGISTRATION_MAIL
from gympoint.jobs.tasks import cancellation_mail, registration_mail

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


@pytest.fixture
def mailer() -> MagicMock:
    """Patch the mailer used by the tasks."""
    with patch("gympoint.jobs.tasks.get_mailer") as get_mailer:
        yield get_mailer.return_value


@pytest.mark.unit
class TestTaskNames:
    def test_tasks_are_registered_under_job_keys(self) -> None:
        assert registration_mail.name == REGISTRATION_MAIL
        assert cancellation_mail.name == CANCELLATION_MAIL


@pytest.mark.unit
class TestRegistrationMailTask:
    def test_sends_confirmation(self, mailer: MagicMock) -> None:
        registration_mail(REGISTRATION_PAYLOAD)

        mailer.send.assert_called_once()
        message = mailer.send.call_args.args[0]
        assert message.to == "ana@example.com"
        assert "10/04/2024" in message.body

    def test_invalid_payload_raises(self, mailer: MagicMock) -> None:
        with pytest.raises(ValidationError):
            registration_mail({"student": {"id": 1}})

        mailer.send.assert_not_called()

    def test_smtp_error_propagates(self, mailer: MagicMock) -> None:
        mailer.send.side_effect = smtplib.SMTPServerDisconnected("gone")

        with pytest.raises(smtplib.SMTPServerDisconnected):
            registration_mail(REGISTRATION_PAYLOAD)


@pytest.mark.unit
class TestCancellationMailTask:
    def test_sends_notice(self, mailer: MagicMock) -> None:
        cancellation_mail(CANCELLATION_PAYLOAD)

        mailer.send.assert_called_once()
        message = mailer.send.call_args.args[0]
        assert message.to == "ana@example.com"
        assert "cancelled" in message.subject
