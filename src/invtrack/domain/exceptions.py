"""Domain-level exceptions.

All inventory errors are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """A structurally invalid value was supplied to a create or update."""


class InvalidOperationError(DomainException):
    """A stock mutation would drive the quantity below zero."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist."""


class PersistenceError(DomainException):
    """The backing file could not be read or written."""
