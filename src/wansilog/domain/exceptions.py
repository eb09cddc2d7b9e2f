"""Domain-level exceptions.

Every error the register can report is a subclass of DomainException so
the CLI layer can catch them uniformly, show the message and re-prompt.
None of them is meant to end the process.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class FormatError(DomainException):
    """Operator text could not be read as the number that was expected."""


class InsufficientPaymentError(DomainException):
    """The tendered amount does not cover the order total."""


class EntityNotFoundError(DomainException):
    """A requested entity (e.g. an order line position) does not exist."""


class PersistenceError(DomainException):
    """Writing to or reading from the transaction ledger failed."""
