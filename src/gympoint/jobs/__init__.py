"""Jobs package - Background notification jobs and the queues that carry them."""

from gympoint.jobs.queue import (
    CANCELLATION_MAIL,
    REGISTRATION_MAIL,
    CeleryJobQueue,
    EnqueuedJob,
    InMemoryJobQueue,
    JobQueue,
)

__all__ = [
    "CANCELLATION_MAIL",
    "REGISTRATION_MAIL",
    "CeleryJobQueue",
    "EnqueuedJob",
    "InMemoryJobQueue",
    "JobQueue",
]
