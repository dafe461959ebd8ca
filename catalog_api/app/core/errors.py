"""
Error types raised by the service layer.

Every error is a ``ValueError`` so callers that only care about
"the client asked for something impossible" can catch that alone.
Endpoints map each subclass to its own HTTP status.
"""


class CatalogError(ValueError):
    """Base class for catalog failures caused by the request."""


class NotFoundError(CatalogError):
    """A targeted read, update or delete matched zero rows."""


class AmbiguousMatchError(CatalogError):
    """A lookup by primary key returned more than one row."""


class ConflictError(CatalogError):
    """The operation is blocked by rows that depend on the target."""


class ConstraintViolationError(CatalogError):
    """The store rejected a write (foreign key, uniqueness, NOT NULL)."""
