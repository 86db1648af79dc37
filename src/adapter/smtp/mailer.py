"""SMTP implementation of MailerPort.

Connects to an authenticated relay over implicit TLS (SMTP_SSL), one
connection per message. No retry: relay errors surface to the caller.
"""

import os
import smtplib
from email.message import EmailMessage
from logging import getLogger

from domain.model.errors import DependencyError

logger = getLogger(__name__)

SMTP_HOST = os.getenv('SMTP_HOST', 'smtp.gmail.com')
SMTP_PORT = int(os.getenv('SMTP_PORT', '465'))
SMTP_TIMEOUT = float(os.getenv('SMTP_TIMEOUT', '10'))


class SmtpMailer:
    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        host: str = SMTP_HOST,
        port: int = SMTP_PORT,
        timeout: float = SMTP_TIMEOUT,
    ):
        self.username = username if username is not None else os.getenv('EMAIL_USER', '')
        self.password = password if password is not None else os.getenv('EMAIL_PASS', '')
        self.host = host
        self.port = port
        self.timeout = timeout

    @property
    def sender(self) -> str:
        return self.username

    def is_configured(self) -> bool:
        return bool(self.username and self.password)

    def send(self, subject: str, body: str, to: str) -> None:
        if not self.is_configured():
            logger.error("Mail relay credentials not configured")
            raise DependencyError("Mail relay not configured")

        # UnicodeError: non-ASCII credentials in login; ValueError: CR/LF in a header
        try:
            msg = EmailMessage()
            msg['From'] = self.sender
            msg['To'] = to
            msg['Subject'] = subject
            msg.set_content(body)

            with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.login(self.username, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError, UnicodeError, ValueError) as e:
            logger.error("Failed to send email", extra={"to": to, "host": self.host, "error": str(e)[:200]})
            raise DependencyError("Failed to send email") from e

        logger.info("Email sent", extra={"to": to, "subject": subject})
