"""Store - Persistent storage for students, plans and registrations."""

from gympoint.store.exceptions import (
    PlanNotFoundError,
    RegistrationNotFoundError,
    StoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from gympoint.store.models import (
    Plan,
    Registration,
    Student,
)
from gympoint.store.store import Store

__all__ = [
    "Plan",
    "PlanNotFoundError",
    "Registration",
    "RegistrationNotFoundError",
    "Store",
    "StoreError",
    "Student",
    "StudentExistsError",
    "StudentNotFoundError",
]
