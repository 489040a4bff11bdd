"""Shared error types for protmod."""

from __future__ import annotations


class ProtmodError(Exception):
    """Base error type for protmod."""


class InputError(ProtmodError, ValueError):
    """Raised when an argument is missing, of the wrong type or empty."""


class RegistrationError(ProtmodError, ValueError):
    """Raised when a registration would break a registry invariant.

    Covers duplicate modification ids, setting an optional field twice and
    cross-reference ids already claimed by another modification.
    """


class CatalogError(ProtmodError, RuntimeError):
    """Raised when a modification catalog cannot be interpreted."""
