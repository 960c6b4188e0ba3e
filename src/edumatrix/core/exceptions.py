class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a username, student or teacher id does not exist."""


class PersistenceError(DomainError):
    """Raised when an attendance batch could not be written.

    The whole batch may be retried: upserts are idempotent.
    """


class AuthenticationError(DomainError):
    """Raised when a request has no logged-in user."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
