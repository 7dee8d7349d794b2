"""Shared pytest fixtures and configuration."""

from datetime import datetime
from decimal import Decimal

import pytest

from gympoint.jobs import InMemoryJobQueue
from gympoint.store import Plan, Store, Student

# Fixed "now" used by tests that inject a clock
NOW = datetime(2024, 1, 1, 9, 15)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def store():
    """Create an in-memory Store."""
    s = Store(":memory:")
    yield s
    s.close()


@pytest.fixture
def job_queue() -> InMemoryJobQueue:
    """Create a queue that records enqueued jobs."""
    return InMemoryJobQueue()


@pytest.fixture
def clock():
    """Clock frozen at NOW."""
    return lambda: NOW


@pytest.fixture
def student(store: Store) -> Student:
    return store.create_student(name="Ana Souza", email="ana@example.com")


@pytest.fixture
def plan(store: Store) -> Plan:
    return store.create_plan(title="Gold", duration=3, price=Decimal("100.00"))
