"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected at the boundary or an invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ReceiptScanFailed(DomainException):
    """The receipt extractor produced no usable items."""
