"""Domain-level exceptions.

All configuration and construction errors are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  An unhandled *condition* is not one of these: it
is a dispatch outcome, reported as a value.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidErrorCode(ValidationError):
    """A user-raised application error carries a code outside the permitted range."""

    def __init__(self, code: int, low: int, high: int) -> None:
        self.code = code
        super().__init__(
            f"Application error code {code} is outside the permitted range "
            f"[{low}, {high}]"
        )


class DuplicateHandler(ValidationError):
    """Two handler clauses would catch the same condition."""

    def __init__(self, identifiers: frozenset[str] | set[str], message: str | None = None) -> None:
        self.identifiers = frozenset(identifiers)
        names = ", ".join(sorted(self.identifiers))
        super().__init__(message or f"Duplicate handler for: {names}")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
