"""Unit tests for Store student and plan operations."""

from decimal import Decimal

import pytest

from gympoint.store import (
    PlanNotFoundError,
    Store,
    StudentExistsError,
    StudentNotFoundError,
)


@pytest.mark.unit
class TestCreateStudent:
    """Tests for create_student."""

    def test_create_student(self, store: Store) -> None:
        """Student gets an ID and timestamps."""
        student = store.create_student(name="Ana Souza", email="ana@example.com")

        assert student.id is not None
        assert student.name == "Ana Souza"
        assert student.email == "ana@example.com"
        assert student.created_at is not None

    def test_create_student_duplicate_email_raises(self, store: Store) -> None:
        """StudentExistsError on duplicate e-mail."""
        store.create_student(name="Ana", email="ana@example.com")

        with pytest.raises(StudentExistsError) as exc_info:
            store.create_student(name="Other Ana", email="ana@example.com")

        assert "ana@example.com" in str(exc_info.value)


@pytest.mark.unit
class TestGetStudent:
    """Tests for get_student."""

    def test_get_student_exists(self, store: Store) -> None:
        created = store.create_student(name="Ana", email="ana@example.com")

        retrieved = store.get_student(created.id)

        assert retrieved.id == created.id
        assert retrieved.email == "ana@example.com"

    def test_get_student_not_found_raises(self, store: Store) -> None:
        with pytest.raises(StudentNotFoundError) as exc_info:
            store.get_student(999)

        assert "999" in str(exc_info.value)


@pytest.mark.unit
class TestPlans:
    """Tests for create_plan, get_plan and list_plans."""

    def test_create_plan(self, store: Store) -> None:
        plan = store.create_plan(title="Gold", duration=3, price=Decimal("109.90"))

        assert plan.id is not None
        assert plan.title == "Gold"
        assert plan.duration == 3
        assert plan.price == Decimal("109.90")

    def test_get_plan_exists(self, store: Store) -> None:
        created = store.create_plan(title="Start", duration=1, price=Decimal("129"))

        retrieved = store.get_plan(created.id)

        assert retrieved.title == "Start"
        assert retrieved.price == Decimal("129")

    def test_get_plan_not_found_raises(self, store: Store) -> None:
        with pytest.raises(PlanNotFoundError) as exc_info:
            store.get_plan(42)

        assert "42" in str(exc_info.value)

    def test_list_plans_empty(self, store: Store) -> None:
        assert store.list_plans() == []

    def test_list_plans_ordered_by_duration(self, store: Store) -> None:
        store.create_plan(title="Diamond", duration=6, price=Decimal("89.90"))
        store.create_plan(title="Start", duration=1, price=Decimal("129.00"))
        store.create_plan(title="Gold", duration=3, price=Decimal("109.00"))

        titles = [p.title for p in store.list_plans()]

        assert titles == ["Start", "Gold", "Diamond"]
