"""RegistrationService - Create, list, replace and cancel registrations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gympoint.jobs.payloads import cancellation_mail_payload, registration_mail_payload
from gympoint.jobs.queue import CANCELLATION_MAIL, REGISTRATION_MAIL
from gympoint.registrations.dates import (
    add_months,
    format_end_date,
    start_of_hour,
    to_utc_naive,
    total_price,
    utc_now,
)
from gympoint.registrations.exceptions import InvalidPeriodError, PastDateError

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime
    from decimal import Decimal

    from gympoint.jobs.queue import JobQueue
    from gympoint.store import Plan, Registration, Store

logger = logging.getLogger(__name__)


@dataclass
class RegistrationPeriod:
    """Fields derived from a plan and a requested start date.

    Attributes:
        plan_id: The plan the period was computed for.
        start_date: Requested start truncated to the hour.
        end_date: start_date plus the plan's duration in months.
        price: Monthly price times duration.
    """

    plan_id: int
    start_date: datetime
    end_date: datetime
    price: Decimal


class RegistrationService:
    """Applies the registration rules on top of the Store and a JobQueue.

    The service holds no state of its own; the clock is injectable so the
    "no past dates" rule can be tested deterministically.
    """

    def __init__(
        self,
        store: Store,
        job_queue: JobQueue,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            store: Store used for lookups and persistence.
            job_queue: Queue that receives notification jobs.
            clock: Returns the current naive UTC time.
        """
        self.store = store
        self.job_queue = job_queue
        self.clock = clock

    def compute_period(self, plan: Plan, start_date: datetime) -> RegistrationPeriod:
        """Derive start, end and price for a plan.

        Raises:
            PastDateError: If the start, truncated to the hour, is before now.
            InvalidPeriodError: If the start or end date falls outside years 1-9999.
        """
        try:
            hour_start = start_of_hour(to_utc_naive(start_date))
        except OverflowError as e:
            raise InvalidPeriodError(f"Start date {start_date.isoformat()} is out of range") from e
        if hour_start < self.clock():
            raise PastDateError("Past dates are not permitted")

        try:
            end_date = add_months(hour_start, plan.duration)
        except (ValueError, OverflowError) as e:
            raise InvalidPeriodError(
                f"Plan {plan.id} starting {hour_start.isoformat()} ends out of range"
            ) from e

        return RegistrationPeriod(
            plan_id=plan.id,
            start_date=hour_start,
            end_date=end_date,
            price=total_price(plan.price, plan.duration),
        )

    def create(self, student_id: int, plan_id: int, start_date: datetime) -> Registration:
        """Register a student in a plan and queue the confirmation e-mail.

        Args:
            student_id: The student's unique ID.
            plan_id: The plan's unique ID.
            start_date: Requested start; truncated to the hour.

        Returns:
            The persisted Registration.

        Raises:
            StudentNotFoundError: If the student doesn't exist.
            PlanNotFoundError: If the plan doesn't exist.
            PastDateError: If the start lies in the past.
        """
        student = self.store.get_student(student_id)
        plan = self.store.get_plan(plan_id)
        period = self.compute_period(plan, start_date)

        registration = self.store.create_registration(
            student_id=student.id,
            plan_id=plan.id,
            start_date=period.start_date,
            end_date=period.end_date,
            price=period.price,
        )
        logger.info(
            "Created registration %s (student=%s, plan=%s, end=%s)",
            registration.id,
            student.id,
            plan.id,
            period.end_date.isoformat(),
        )

        self.job_queue.enqueue(
            REGISTRATION_MAIL,
            registration_mail_payload(
                student=student,
                plan=plan,
                price=period.price,
                formatted_end_date=format_end_date(period.end_date),
            ),
        )
        return registration

    def list_active(self, student_id: int) -> list[Registration]:
        """List a student's registrations that have not been cancelled."""
        return self.store.list_active_registrations(student_id)

    def update(
        self,
        registration_id: int,
        plan_id: int | None = None,
        start_date: datetime | None = None,
    ) -> RegistrationPeriod:
        """Replace plan, period and price of a registration.

        Omitted values fall back to the registration's current plan and
        start date; end date and price are always recomputed. No e-mail is
        queued.

        Returns:
            The recomputed fields, as persisted.

        Raises:
            RegistrationNotFoundError: If the registration doesn't exist.
            PlanNotFoundError: If the plan doesn't exist.
            PastDateError: If the start lies in the past.
        """
        current = self.store.get_registration(registration_id)
        plan = self.store.get_plan(plan_id if plan_id is not None else current.plan_id)
        period = self.compute_period(
            plan, start_date if start_date is not None else current.start_date
        )

        self.store.update_registration(
            registration_id,
            plan_id=period.plan_id,
            start_date=period.start_date,
            end_date=period.end_date,
            price=period.price,
        )
        logger.info("Updated registration %s (plan=%s)", registration_id, period.plan_id)
        return period

    def cancel(self, registration_id: int) -> Registration:
        """Cancel a registration and queue the cancellation notice.

        Cancelling an already cancelled registration stamps a new
        ``cancelled_at`` and sends the notice again.

        Returns:
            The cancelled Registration with student and plan loaded.

        Raises:
            RegistrationNotFoundError: If the registration doesn't exist.
        """
        registration = self.store.cancel_registration(registration_id, self.clock())
        logger.info("Cancelled registration %s", registration_id)

        self.job_queue.enqueue(CANCELLATION_MAIL, cancellation_mail_payload(registration))
        return registration
