"""Domain-level exceptions.

All invariant violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and turn them into
user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument was missing or an invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
