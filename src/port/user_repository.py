from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user.

        Raises ConflictError if the email is taken, DependencyError on store failure.
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def ensure_indexes(self) -> bool:
        """Create the indexes the collection relies on. Return True if successful."""
        ...
