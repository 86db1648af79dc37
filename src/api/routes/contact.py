"""Contact-form route."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_contact_repo, get_mailer
from api.models import ContactRequest, MessageResponse
from domain.model.errors import DependencyError
from port.contact_repository import ContactRepository
from port.mailer import MailerPort
from services.contact_service import submit_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", response_model=MessageResponse)
def contact(
    request: ContactRequest,
    repo: ContactRepository = Depends(get_contact_repo),
    mailer: MailerPort = Depends(get_mailer),
):
    """Record a contact submission and email it to the site owner.

    A 500 means nothing was kept; the client may resubmit.
    """
    try:
        submit_contact(
            repo,
            mailer,
            name=request.name,
            email=request.email,
            message=request.message,
            phone=request.phone,
        )
    except DependencyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error sending message")

    return MessageResponse(message="Message sent successfully!")
