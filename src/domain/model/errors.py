"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class ConflictError(DomainError):
    """Entity with the same unique key already exists."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class AuthError(DomainError):
    """Credentials were rejected."""


class InvalidTokenError(AuthError):
    """Bearer token has a bad signature, is expired, or carries no subject."""


class DependencyError(DomainError):
    """An external collaborator (database, mail relay) failed."""
