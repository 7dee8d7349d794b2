"""Registration endpoints."""

from fastapi import APIRouter

from gympoint.api.dependencies import RegistrationServiceDep
from gympoint.api.models import (
    APIResponse,
    CancelledRegistrationResponse,
    RegistrationCreate,
    RegistrationPeriodResponse,
    RegistrationResponse,
    RegistrationUpdate,
    cancelled_registration_to_response,
    period_to_response,
    registration_to_response,
)

router = APIRouter(prefix="/registrations", tags=["registrations"])


@router.post("", response_model=APIResponse[RegistrationResponse])
def create_registration(
    registration: RegistrationCreate, service: RegistrationServiceDep
) -> APIResponse[RegistrationResponse]:
    """Register a student in a plan."""
    created = service.create(
        student_id=registration.student_id,
        plan_id=registration.plan_id,
        start_date=registration.start_date,
    )
    return APIResponse(data=registration_to_response(created))


@router.get("/{student_id}", response_model=APIResponse[list[RegistrationResponse]])
def list_registrations(
    student_id: int, service: RegistrationServiceDep
) -> APIResponse[list[RegistrationResponse]]:
    """List a student's active registrations."""
    registrations = service.list_active(student_id)
    return APIResponse(data=[registration_to_response(r) for r in registrations])


@router.put("/{registration_id}", response_model=APIResponse[RegistrationPeriodResponse])
def update_registration(
    registration_id: int, registration: RegistrationUpdate, service: RegistrationServiceDep
) -> APIResponse[RegistrationPeriodResponse]:
    """Replace a registration's plan and period."""
    period = service.update(
        registration_id,
        plan_id=registration.plan_id,
        start_date=registration.start_date,
    )
    return APIResponse(data=period_to_response(period))


@router.delete("/{registration_id}", response_model=APIResponse[CancelledRegistrationResponse])
def cancel_registration(
    registration_id: int, service: RegistrationServiceDep
) -> APIResponse[CancelledRegistrationResponse]:
    """Cancel a registration."""
    cancelled = service.cancel(registration_id)
    return APIResponse(data=cancelled_registration_to_response(cancelled))
