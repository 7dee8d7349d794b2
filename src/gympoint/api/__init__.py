"""REST API for Gympoint."""

from gympoint.api.app import app, create_app
from gympoint.api.models import (
    APIResponse,
    CancelledRegistrationResponse,
    RegistrationCreate,
    RegistrationPeriodResponse,
    RegistrationResponse,
    RegistrationUpdate,
)

__all__ = [
    "APIResponse",
    "CancelledRegistrationResponse",
    "RegistrationCreate",
    "RegistrationPeriodResponse",
    "RegistrationResponse",
    "RegistrationUpdate",
    "app",
    "create_app",
]
