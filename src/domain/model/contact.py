from dataclasses import dataclass
from datetime import datetime


@dataclass
class Contact:
    """Domain model for a contact-form submission."""
    id: str
    name: str
    email: str
    message: str
    phone: str
    created_at: datetime

    def notification_text(self) -> str:
        """Plaintext body for the notification email."""
        return (
            f"Name: {self.name}\n"
            f"Email: {self.email}\n"
            f"Phone: {self.phone}\n"
            f"Message: {self.message}"
        )
