"""Celery application shared by the API (producer) and the mail worker.

Run the worker with::

    celery -A gympoint.jobs.celery_app worker --loglevel=info
"""

from __future__ import annotations

from celery import Celery

from gympoint.config import Settings, get_settings


def create_celery_app(settings: Settings | None = None) -> Celery:
    """Create the Celery app bound to the configured broker."""
    settings = settings or get_settings()
    app = Celery(
        "gympoint",
        broker=settings.broker_url,
        include=["gympoint.jobs.tasks"],
    )
    app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        task_ignore_result=True,
        task_acks_late=True,
        timezone="UTC",
        enable_utc=True,
    )
    return app


celery_app = create_celery_app()
