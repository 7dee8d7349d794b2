"""Registrations package - Enrollment rules for gym plans."""

from gympoint.registrations.exceptions import (
    InvalidPeriodError,
    PastDateError,
    RegistrationError,
)
from gympoint.registrations.service import RegistrationPeriod, RegistrationService

__all__ = [
    "InvalidPeriodError",
    "PastDateError",
    "RegistrationError",
    "RegistrationPeriod",
    "RegistrationService",
]
