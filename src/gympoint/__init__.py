"""Gympoint - Gym-membership registrations service."""

__version__ = "0.1.0"
