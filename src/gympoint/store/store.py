"""Store - Main API for persistence operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from gympoint.store.database import Database
from gympoint.store.exceptions import (
    PlanNotFoundError,
    RegistrationNotFoundError,
    StudentExistsError,
    StudentNotFoundError,
)
from gympoint.store.models import Plan, Registration, Student

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal


class Store:
    """Main API for Store operations.

    Provides lookups for Students and Plans, and create, list, replace and
    cancel operations for Registrations. Every call runs in its own session.
    """

    def __init__(self, db_path: str = "gympoint.db") -> None:
        """Initialize Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Student Operations ---

    def create_student(self, name: str, email: str) -> Student:
        """Create a new student.

        Args:
            name: Student's full name
            email: Address notifications are sent to

        Returns:
            Created Student object with generated ID

        Raises:
            StudentExistsError: If a student with the same e-mail exists
        """
        with self._db.session() as session:
            student = Student(name=name, email=email)
            session.add(student)
            try:
                session.commit()
            except IntegrityError as e:
                raise StudentExistsError(f"Student with email '{email}' already exists") from e
            session.refresh(student)
            return student

    def get_student(self, student_id: int) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        with self._db.session() as session:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError(f"Student with id '{student_id}' not found")
            return student

    # --- Plan Operations ---

    def create_plan(self, title: str, duration: int, price: Decimal) -> Plan:
        """Create a new plan.

        Args:
            title: Display name of the plan
            duration: Length of the plan in whole months
            price: Price per month

        Returns:
            Created Plan object with generated ID
        """
        with self._db.session() as session:
            plan = Plan(title=title, duration=duration, price=price)
            session.add(plan)
            session.commit()
            session.refresh(plan)
            return plan

    def get_plan(self, plan_id: int) -> Plan:
        """Get plan by ID.

        Raises:
            PlanNotFoundError: If plan doesn't exist
        """
        with self._db.session() as session:
            plan = session.get(Plan, plan_id)
            if plan is None:
                raise PlanNotFoundError(f"Plan with id '{plan_id}' not found")
            return plan

    def list_plans(self) -> list[Plan]:
        """List all plans, ordered by duration then title."""
        with self._db.session() as session:
            stmt = select(Plan).order_by(Plan.duration, Plan.title)
            return list(session.execute(stmt).scalars().all())

    # --- Registration Operations ---

    def create_registration(
        self,
        student_id: int,
        plan_id: int,
        start_date: datetime,
        end_date: datetime,
        price: Decimal,
    ) -> Registration:
        """Create a new registration.

        Args:
            student_id: ID of the enrolled student
            plan_id: ID of the plan enrolled in
            start_date: First hour of the registration
            end_date: Expiry of the registration
            price: Total price for the whole period

        Returns:
            Created Registration object with generated ID
        """
        with self._db.session() as session:
            registration = Registration(
                student_id=student_id,
                plan_id=plan_id,
                start_date=start_date,
                end_date=end_date,
                price=price,
            )
            session.add(registration)
            session.commit()
            session.refresh(registration)
            return registration

    def get_registration(self, registration_id: int) -> Registration:
        """Get registration by ID.

        Args:
            registration_id: The registration's unique ID

        Returns:
            The Registration object

        Raises:
            RegistrationNotFoundError: If registration doesn't exist
        """
        with self._db.session() as session:
            registration = session.get(Registration, registration_id)
            if registration is None:
                raise RegistrationNotFoundError(
                    f"Registration with id '{registration_id}' not found"
                )
            return registration

    def list_active_registrations(self, student_id: int) -> list[Registration]:
        """List a student's registrations that have not been cancelled.

        Args:
            student_id: The student's unique ID

        Returns:
            Active registrations in insertion order. Empty if the student
            has none or doesn't exist.
        """
        with self._db.session() as session:
            stmt = (
                select(Registration)
                .where(
                    Registration.student_id == student_id,
                    Registration.cancelled_at.is_(None),
                )
                .order_by(Registration.id)
            )
            return list(session.execute(stmt).scalars().all())

    def update_registration(
        self,
        registration_id: int,
        plan_id: int,
        start_date: datetime,
        end_date: datetime,
        price: Decimal,
    ) -> Registration:
        """Replace the plan, period and price of a registration.

        All four fields are overwritten together.

        Raises:
            RegistrationNotFoundError: If registration doesn't exist
        """
        with self._db.session() as session:
            registration = session.get(Registration, registration_id)
            if registration is None:
                raise RegistrationNotFoundError(
                    f"Registration with id '{registration_id}' not found"
                )

            registration.plan_id = plan_id
            registration.start_date = start_date
            registration.end_date = end_date
            registration.price = price

            session.commit()
            session.refresh(registration)
            return registration

    def cancel_registration(self, registration_id: int, cancelled_at: datetime) -> Registration:
        """Soft-delete a registration by stamping ``cancelled_at``.

        A registration that is already cancelled gets the new timestamp.

        Args:
            registration_id: The registration's unique ID
            cancelled_at: Time of cancellation

        Returns:
            The cancelled Registration with student and plan loaded

        Raises:
            RegistrationNotFoundError: If registration doesn't exist
        """
        with self._db.session() as session:
            registration = session.get(
                Registration, registration_id, options=_relation_options()
            )
            if registration is None:
                raise RegistrationNotFoundError(
                    f"Registration with id '{registration_id}' not found"
                )

            registration.cancelled_at = cancelled_at
            session.commit()
            session.refresh(registration, attribute_names=["cancelled_at", "updated_at"])
            return registration


def _relation_options() -> list:
    return [selectinload(Registration.student), selectinload(Registration.plan)]
