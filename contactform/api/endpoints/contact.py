from fastapi import APIRouter, Depends, Request, Response
import logging

from contactform.api.deps import get_sender, get_store
from contactform.core.contact_handler import handle_contact_request
from contactform.models.contact import ContactRequest, HttpMethod
from contactform.services.email_service import NotificationSender
from contactform.services.submission_store import SubmissionStore

router = APIRouter()
logger = logging.getLogger(__name__)

CONTACT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/contact", methods=CONTACT_METHODS)
async def contact(request: Request,
                  store: SubmissionStore = Depends(get_store),
                  sender: NotificationSender = Depends(get_sender)):
    """
    Contact form endpoint.

    Translates the Starlette request into a ContactRequest and the handler's
    ContactResponse back into a Response. Status codes and bodies come from
    handle_contact_request.
    """
    raw_body = await request.body()
    contact_request = ContactRequest(
        method=HttpMethod.from_raw(request.method),
        origin=request.headers.get("origin"),
        body=raw_body.decode("utf-8", errors="replace") if raw_body else None,
    )

    result = await handle_contact_request(contact_request, store, sender)
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)
