"""Custom exceptions for the Store."""


class StoreError(Exception):
    """Base exception for Store errors."""


class StudentNotFoundError(StoreError):
    """Student with given ID does not exist."""


class PlanNotFoundError(StoreError):
    """Plan with given ID does not exist."""


class RegistrationNotFoundError(StoreError):
    """Registration with given ID does not exist."""


class StudentExistsError(StoreError):
    """Student with given e-mail already exists."""
