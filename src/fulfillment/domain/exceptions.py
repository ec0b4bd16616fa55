"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InventoryShortfallError(ValidationError):
    """Not enough stock to reserve an order's items."""


class InvalidStatusTransitionError(ValidationError):
    """The order's current status does not allow the requested transition."""


class CapabilityNotSupportedError(DomainException):
    """The order does not support the requested operation in its current state."""


class ConfigurationError(DomainException):
    """A strategy, processor or handler was requested but never registered.

    Always fatal: callers must not fall back to a default.
    """
