"""SQLAlchemy models for the Store."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Student(Base):
    """Student model - a gym member that can hold registrations."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    registrations: Mapped[list[Registration]] = relationship(
        "Registration", back_populates="student"
    )

    def __init__(self, name: str, email: str, id: int | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.id = id
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r}, email={self.email!r})>"


class Plan(Base):
    """Plan model - a membership tier priced per month."""

    __tablename__ = "plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        title: str,
        duration: int,
        price: Decimal,
        id: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id
        self.title = title
        self.duration = duration
        self.price = price

    def __repr__(self) -> str:
        return f"<Plan(id={self.id!r}, title={self.title!r}, duration={self.duration!r})>"


class Registration(Base):
    """Registration model - a student's enrollment in a plan for a bounded period.

    A registration is active while ``cancelled_at`` is null. Cancelling sets the
    timestamp; rows are never hard-deleted.
    """

    __tablename__ = "registrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id"), nullable=False, index=True
    )
    plan_id: Mapped[int] = mapped_column(Integer, ForeignKey("plans.id"), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    student: Mapped[Student] = relationship("Student", back_populates="registrations")
    plan: Mapped[Plan] = relationship("Plan")

    def __init__(
        self,
        student_id: int,
        plan_id: int,
        start_date: datetime,
        end_date: datetime,
        price: Decimal,
        id: int | None = None,
        cancelled_at: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id
        self.student_id = student_id
        self.plan_id = plan_id
        self.start_date = start_date
        self.end_date = end_date
        self.price = price
        self.cancelled_at = cancelled_at

    def __repr__(self) -> str:
        return (
            f"<Registration(id={self.id!r}, student_id={self.student_id!r}, "
            f"plan_id={self.plan_id!r}, cancelled_at={self.cancelled_at!r})>"
        )
