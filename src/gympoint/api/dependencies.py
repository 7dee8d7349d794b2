"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Callable, Generator  # noqa: TC003
from datetime import datetime  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from gympoint.config import Settings
from gympoint.jobs.queue import InMemoryJobQueue, JobQueue
from gympoint.registrations import RegistrationService
from gympoint.registrations.dates import utc_now
from gympoint.store import Store

# Global Store instance (initialized on app startup)
_store: Store | None = None


def init_store(db_path: str = "gympoint.db") -> Store:
    """Initialize the global Store instance."""
    global _store  # noqa: PLW0603
    _store = Store(db_path)
    return _store


def close_store() -> None:
    """Close the global Store instance."""
    global _store  # noqa: PLW0603
    if _store is not None:
        _store.close()
        _store = None


def get_store() -> Generator[Store, None, None]:
    """Dependency that provides the Store instance."""
    if _store is None:
        raise RuntimeError("Store not initialized. Call init_store() first.")
    yield _store


# Type alias for dependency injection
StoreDep = Annotated[Store, Depends(get_store)]

# Global JobQueue instance (initialized on app startup)
_job_queue: JobQueue | None = None


def build_job_queue(settings: Settings) -> JobQueue:
    """Create the JobQueue selected by the ``queue_backend`` setting."""
    if settings.queue_backend == "memory":
        return InMemoryJobQueue()

    from gympoint.jobs.celery_app import create_celery_app  # noqa: PLC0415
    from gympoint.jobs.queue import CeleryJobQueue  # noqa: PLC0415

    return CeleryJobQueue(create_celery_app(settings))


def init_job_queue(job_queue: JobQueue) -> JobQueue:
    """Initialize the global JobQueue instance."""
    global _job_queue  # noqa: PLW0603
    _job_queue = job_queue
    return _job_queue


def close_job_queue() -> None:
    """Close the global JobQueue instance."""
    global _job_queue  # noqa: PLW0603
    _job_queue = None


def get_job_queue() -> Generator[JobQueue, None, None]:
    """Dependency that provides the JobQueue instance."""
    if _job_queue is None:
        raise RuntimeError("JobQueue not initialized. Call init_job_queue() first.")
    yield _job_queue


JobQueueDep = Annotated[JobQueue, Depends(get_job_queue)]


def get_clock() -> Callable[[], datetime]:
    """Dependency that provides the current-time function."""
    return utc_now


ClockDep = Annotated[Callable[[], datetime], Depends(get_clock)]


def get_registration_service(
    store: StoreDep, job_queue: JobQueueDep, clock: ClockDep
) -> RegistrationService:
    """Dependency that builds a RegistrationService per request."""
    return RegistrationService(store=store, job_queue=job_queue, clock=clock)


RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
