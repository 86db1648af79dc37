"""In-memory implementation of ContactRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.contact import Contact
from domain.model.errors import DependencyError


class FakeContactRepository:
    def __init__(self, fail: bool = False):
        self.store: dict[str, Contact] = {}
        self.fail = fail

    def create(self, name: str, email: str, message: str, phone: str) -> Contact:
        if self.fail:
            raise DependencyError("Failed to save contact")

        contact = Contact(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            message=message,
            phone=phone,
            created_at=datetime.now(timezone.utc),
        )
        self.store[contact.id] = contact
        return contact

    def delete(self, contact_id: str) -> bool:
        return self.store.pop(contact_id, None) is not None
