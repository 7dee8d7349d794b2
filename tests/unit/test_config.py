"""Unit tests for settings and queue selection."""

import pytest

from gympoint.api.dependencies import build_job_queue
from gympoint.config import Settings
from gympoint.jobs import CeleryJobQueue, InMemoryJobQueue


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GYMPOINT_DATABASE_PATH", raising=False)
        monkeypatch.delenv("GYMPOINT_QUEUE_BACKEND", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_path == "gympoint.db"
        assert settings.queue_backend == "celery"
        assert settings.smtp_port == 25

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GYMPOINT_DATABASE_PATH", "/tmp/gym.db")
        monkeypatch.setenv("GYMPOINT_QUEUE_BACKEND", "memory")
        monkeypatch.setenv("GYMPOINT_SMTP_PORT", "587")

        settings = Settings(_env_file=None)

        assert settings.database_path == "/tmp/gym.db"
        assert settings.queue_backend == "memory"
        assert settings.smtp_port == 587

    def test_unknown_queue_backend_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GYMPOINT_QUEUE_BACKEND", "kafka")

        with pytest.raises(ValueError):
            Settings(_env_file=None)


@pytest.mark.unit
class TestBuildJobQueue:
    def test_memory_backend(self) -> None:
        queue = build_job_queue(Settings(queue_backend="memory", _env_file=None))

        assert isinstance(queue, InMemoryJobQueue)

    def test_celery_backend(self) -> None:
        """Building the Celery queue does not contact the broker."""
        queue = build_job_queue(
            Settings(queue_backend="celery", broker_url="memory://", _env_file=None)
        )

        assert isinstance(queue, CeleryJobQueue)
