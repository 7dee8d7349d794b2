"""Pydantic models for job payloads.

Payloads cross the broker as JSON, so the API side dumps them with
``model_dump(mode="json")`` and the worker side validates them back.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict


class StudentPayload(BaseModel):
    """Student as carried in a confirmation e-mail job."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class PlanPayload(BaseModel):
    """Plan as carried in a confirmation e-mail job."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    duration: int
    price: Decimal


class RegistrationMailPayload(BaseModel):
    """Payload of the registration confirmation job."""

    student: StudentPayload
    plan: PlanPayload
    price: Decimal
    formatted_end_date: str


class CancelledStudentPayload(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str


class CancelledPlanPayload(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str


class CancelledRegistrationPayload(BaseModel):
    """Registration with the nested student and plan fields the notice needs."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime
    price: Decimal
    cancelled_at: datetime
    student: CancelledStudentPayload
    plan: CancelledPlanPayload


class CancellationMailPayload(BaseModel):
    """Payload of the cancellation notice job."""

    registration: CancelledRegistrationPayload


def registration_mail_payload(
    student: Any, plan: Any, price: Decimal, formatted_end_date: str
) -> dict[str, Any]:
    """Build the JSON payload for a registration confirmation."""
    return RegistrationMailPayload(
        student=StudentPayload.model_validate(student),
        plan=PlanPayload.model_validate(plan),
        price=price,
        formatted_end_date=formatted_end_date,
    ).model_dump(mode="json")


def cancellation_mail_payload(registration: Any) -> dict[str, Any]:
    """Build the JSON payload for a cancellation notice."""
    return CancellationMailPayload(
        registration=CancelledRegistrationPayload.model_validate(registration),
    ).model_dump(mode="json")
