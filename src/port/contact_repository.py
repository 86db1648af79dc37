from typing import Protocol
from domain.model.contact import Contact


class ContactRepository(Protocol):
    """Protocol defining the interface for contact submission storage."""
    def create(self, name: str, email: str, message: str, phone: str) -> Contact:
        """Persist a contact submission. Raises DependencyError on store failure."""
        ...

    def delete(self, contact_id: str) -> bool:
        """Remove a contact submission. Return True if a record was deleted."""
        ...
