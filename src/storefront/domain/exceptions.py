"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity was zero, negative or not an integer."""


class DuplicateProductError(ValidationError):
    """A product with the same name is already in the catalog."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product in the catalog has the requested name."""


class EmptyCartError(DomainException):
    """Finalize was attempted on a cart without lines.

    Returned inside a ``FinalizeResult`` rather than raised.
    """
