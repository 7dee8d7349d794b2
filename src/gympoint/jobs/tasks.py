"""Celery tasks that deliver notification e-mails."""

from __future__ import annotations

import logging
import smtplib
from typing import Any

from gympoint.config import get_settings
from gympoint.jobs.celery_app import celery_app
from gympoint.jobs.mail import Mailer, render_cancellation_mail, render_registration_mail
from gympoint.jobs.payloads import CancellationMailPayload, RegistrationMailPayload
from gympoint.jobs.queue import CANCELLATION_MAIL, REGISTRATION_MAIL

logger = logging.getLogger(__name__)

# SMTP hiccups are retried by the worker; bad payloads are not
RETRY_OPTIONS: dict[str, Any] = {
    "autoretry_for": (smtplib.SMTPException, OSError),
    "retry_backoff": True,
    "max_retries": 5,
}


def get_mailer() -> Mailer:
    return Mailer.from_settings(get_settings())


@celery_app.task(name=REGISTRATION_MAIL, **RETRY_OPTIONS)
def registration_mail(payload: dict[str, Any]) -> None:
    """Send the registration confirmation described by a RegistrationMail job."""
    job = RegistrationMailPayload.model_validate(payload)
    logger.info("Processing %s for student %s", REGISTRATION_MAIL, job.student.id)
    get_mailer().send(render_registration_mail(job))


@celery_app.task(name=CANCELLATION_MAIL, **RETRY_OPTIONS)
def cancellation_mail(payload: dict[str, Any]) -> None:
    """Send the cancellation notice described by a CancellationMail job."""
    job = CancellationMailPayload.model_validate(payload)
    logger.info("Processing %s for registration %s", CANCELLATION_MAIL, job.registration.id)
    get_mailer().send(render_cancellation_mail(job))
