"""In-memory implementation of MailerPort for testing."""

from dataclasses import dataclass

from domain.model.errors import DependencyError


@dataclass
class SentMail:
    subject: str
    body: str
    to: str


class FakeMailer:
    def __init__(self, sender: str = 'owner@example.com', fail: bool = False):
        self.sender = sender
        self.fail = fail
        self.outbox: list[SentMail] = []

    def send(self, subject: str, body: str, to: str) -> None:
        if self.fail:
            raise DependencyError("Mail relay unavailable")
        self.outbox.append(SentMail(subject=subject, body=body, to=to))

    def is_configured(self) -> bool:
        return True
