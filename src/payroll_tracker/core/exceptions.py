class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when a write collides with existing or concurrent state."""


class AlreadyPaidError(ConflictError):
    """Raised when a wage calculation has already been marked paid."""


class PersistenceError(DomainError):
    """Raised when the store is unreachable or rejects a write."""
