"""Job queue clients.

Handlers only submit jobs; delivery, retries and failures belong to the
worker side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from celery import Celery

logger = logging.getLogger(__name__)

REGISTRATION_MAIL = "RegistrationMail"
CANCELLATION_MAIL = "CancellationMail"


class JobQueue(Protocol):
    """Interface for submitting background jobs."""

    def enqueue(self, job_key: str, payload: dict[str, Any]) -> None:
        """Submit a job without waiting for it to run."""
        ...


class CeleryJobQueue:
    """JobQueue backed by a Celery broker.

    Jobs are sent by task name, so the API process does not need the
    worker's task modules loaded.
    """

    def __init__(self, app: Celery) -> None:
        self._app = app

    def enqueue(self, job_key: str, payload: dict[str, Any]) -> None:
        result = self._app.send_task(job_key, kwargs={"payload": payload})
        logger.info("Enqueued job %s (task_id=%s)", job_key, result.id)


@dataclass
class EnqueuedJob:
    """A job recorded by InMemoryJobQueue."""

    key: str
    payload: dict[str, Any]


@dataclass
class InMemoryJobQueue:
    """JobQueue that records jobs in a list instead of sending them."""

    jobs: list[EnqueuedJob] = field(default_factory=list)

    def enqueue(self, job_key: str, payload: dict[str, Any]) -> None:
        self.jobs.append(EnqueuedJob(key=job_key, payload=payload))
        logger.info("Recorded job %s (%d pending)", job_key, len(self.jobs))

    def keys(self) -> list[str]:
        return [job.key for job in self.jobs]

    def clear(self) -> None:
        self.jobs.clear()
