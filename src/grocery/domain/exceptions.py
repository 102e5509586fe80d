"""Domain-level exceptions.

Every failure the grocery domain can report is a subclass of DomainException,
so the CLI layer catches them in one place and prints a single-line message.
Duplicate or missing products and unknown order ids are *not* errors; those
are signalled through return values.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An invariant was violated or input data is malformed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderSourceError(DomainException):
    """The orders data file is missing or cannot be read."""
