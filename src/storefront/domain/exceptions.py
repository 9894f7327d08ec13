"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule, transition rule or record schema was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or vanished mid-operation)."""


class StoreUnavailableError(DomainException):
    """The backing store cannot be read or written."""


class UploadError(DomainException):
    """An image could not be stored."""
