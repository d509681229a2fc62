"""Domain-level exceptions.

Business failures are subclasses of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.  Store failures
are raised as DataAccessError, which is kept outside that hierarchy.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested vehicle or maintenance record does not exist."""


class DataAccessError(Exception):
    """The underlying data store could not be read."""
