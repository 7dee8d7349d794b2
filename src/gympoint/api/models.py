"""Pydantic models for REST API."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Registration request models


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; JSON true/false must not pass as an id
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


class RegistrationCreate(BaseModel):
    """Request model for creating a registration.

    ``end_date`` and ``price`` are accepted for compatibility with existing
    clients but are always recomputed from the plan.
    """

    student_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime | None = None
    price: Decimal | None = None

    @field_validator("student_id", "plan_id", mode="before")
    @classmethod
    def reject_bool_ids(cls, value: Any) -> Any:
        return _reject_bool(value)


class RegistrationUpdate(BaseModel):
    """Request model for replacing a registration's plan and period.

    Omitted ``plan_id`` and ``start_date`` keep their stored values;
    ``end_date`` and ``price`` are accepted but recomputed.
    """

    plan_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    price: Decimal | None = None

    @field_validator("plan_id", mode="before")
    @classmethod
    def reject_bool_plan_id(cls, value: Any) -> Any:
        return _reject_bool(value)


# Registration response models


class RegistrationResponse(BaseModel):
    """Response model for a registration."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime
    price: Decimal
    cancelled_at: datetime | None
    created_at: datetime
    updated_at: datetime


def registration_to_response(registration: Any) -> RegistrationResponse:
    """Convert a Registration model to RegistrationResponse."""
    return RegistrationResponse.model_validate(registration)


class RegistrationPeriodResponse(BaseModel):
    """Response model for the fields recomputed by an update."""

    model_config = ConfigDict(from_attributes=True)

    plan_id: int
    start_date: datetime
    end_date: datetime
    price: Decimal


def period_to_response(period: Any) -> RegistrationPeriodResponse:
    """Convert a RegistrationPeriod to RegistrationPeriodResponse."""
    return RegistrationPeriodResponse.model_validate(period)


class StudentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str


class PlanSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str


class CancelledRegistrationResponse(RegistrationResponse):
    """Response model for a cancelled registration, with student and plan."""

    student: StudentSummary
    plan: PlanSummary


def cancelled_registration_to_response(registration: Any) -> CancelledRegistrationResponse:
    """Convert a cancelled Registration model to CancelledRegistrationResponse."""
    return CancelledRegistrationResponse.model_validate(registration)
