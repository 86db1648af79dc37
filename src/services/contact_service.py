"""Contact service: persist a contact-form submission and notify the site owner.

Saving and mailing are two independent steps with no shared transaction.
When the notification fails, the freshly saved record is deleted again so a
failed request never leaves a record behind.
"""

import logging

from domain.model.contact import Contact
from domain.model.errors import DependencyError
from port.contact_repository import ContactRepository
from port.mailer import MailerPort

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT = "New Contact Form Submission"


def submit_contact(
    repo: ContactRepository,
    mailer: MailerPort,
    name: str,
    email: str,
    message: str,
    phone: str,
) -> Contact:
    """Save the submission, then email it to the relay account owner.

    Raises:
        DependencyError: store write or mail send failed; nothing is kept
    """
    contact = repo.create(name=name, email=email, message=message, phone=phone)

    try:
        mailer.send(
            subject=NOTIFICATION_SUBJECT,
            body=contact.notification_text(),
            to=mailer.sender,
        )
    except DependencyError:
        _rollback(repo, contact.id)
        raise

    logger.info("Contact submitted", extra={"contactId": contact.id, "email": email})
    return contact


def _rollback(repo: ContactRepository, contact_id: str) -> None:
    try:
        removed = repo.delete(contact_id)
    except DependencyError:
        logger.error("Rollback failed, orphan contact left behind", extra={"contactId": contact_id})
        return
    logger.warning(
        "Notification failed, contact rolled back",
        extra={"contactId": contact_id, "removed": removed},
    )
