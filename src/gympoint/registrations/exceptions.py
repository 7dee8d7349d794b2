"""Exceptions for the Registrations module."""


class RegistrationError(Exception):
    """Base exception for registration rule violations."""

    pass


class PastDateError(RegistrationError):
    """Start date falls before the current time."""

    pass


class InvalidPeriodError(RegistrationError):
    """Start date plus plan duration falls outside the supported calendar."""

    pass
