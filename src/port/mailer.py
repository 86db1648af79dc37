"""Port definition for outbound mail."""

from typing import Protocol


class MailerPort(Protocol):
    sender: str

    def send(self, subject: str, body: str, to: str) -> None:
        """Send one plaintext message. Raises DependencyError if the relay fails."""
        ...

    def is_configured(self) -> bool: ...
