"""
Contact request handling shared by every entry point.

Lifecycle of one request:
    1. OPTIONS  -> 204 preflight
    2. not POST -> 405
    3. invalid or incomplete body -> 400, no side effects
    4. save and send concurrently
    5. 200 if either the save or the send succeeded, 500 if both failed

CORS headers are attached to every response.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Iterable, Optional

from contactform.core.cors import get_cors_headers
from contactform.core.errors import UnsupportedMethodError, ValidationError
from contactform.models.contact import ContactRequest, ContactResponse, HttpMethod, Submission

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for your message. We will get back to you soon!"
VALIDATION_MESSAGE = "All fields are required"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
ERROR_MESSAGE = "An error occurred while processing your request. Please try again later."


def json_response(status_code: int, payload: Dict[str, Any], cors_headers: Dict[str, str]) -> ContactResponse:
    headers = dict(cors_headers)
    headers["Content-Type"] = "application/json"
    return ContactResponse(status_code=status_code, headers=headers, body=json.dumps(payload))


async def _attempt_save(store, submission: Submission) -> bool:
    try:
        return bool(await store.try_save(submission))
    except Exception as e:
        logger.error(f"❌ Error saving to database: {str(e)}")
        return False


async def _attempt_send(sender, submission: Submission) -> bool:
    try:
        await sender.send(submission)
        return True
    except Exception as e:
        logger.error(f"❌ Error sending contact email: {str(e)}")
        return False


async def deliver_submission(submission: Submission, store, sender) -> bool:
    """
    Save and send a submission at the same time.

    Returns:
        bool: True when at least one of the two side effects succeeded
    """
    saved, sent = await asyncio.gather(
        _attempt_save(store, submission),
        _attempt_send(sender, submission),
    )

    if not saved and not sent:
        logger.error("❌ Contact submission was neither saved nor sent")
        return False
    if not saved:
        logger.warning("⚠️ Contact submission sent by email only (database save failed)")
    elif not sent:
        logger.warning("⚠️ Contact submission saved to database only (email send failed)")
    return True


async def handle_contact_request(request: ContactRequest, store, sender,
                                 allowed_origins: Optional[Iterable[str]] = None) -> ContactResponse:
    """
    Process a contact-form request.

    Args:
        request: Canonical request built by an entry adapter
        store: Object with an async try_save(submission) -> bool
        sender: Object with an async send(submission) raising on failure
        allowed_origins: CORS allow-list (defaults to settings)

    Returns:
        ContactResponse: Never raises; unexpected errors map to a 500
    """
    cors_headers = get_cors_headers(request.origin, allowed_origins)

    if request.method == HttpMethod.OPTIONS:
        return ContactResponse(status_code=204, headers=cors_headers, body="")

    try:
        if request.method != HttpMethod.POST:
            raise UnsupportedMethodError(request.method.value)

        submission = Submission.from_json(request.body)
        logger.info(f"📨 Contact form submission received from {submission.email}")

        if await deliver_submission(submission, store, sender):
            return json_response(200, {"success": True, "message": SUCCESS_MESSAGE}, cors_headers)
        return json_response(500, {"success": False, "message": ERROR_MESSAGE}, cors_headers)

    except UnsupportedMethodError as e:
        logger.info(str(e))
        return json_response(405, {"success": False, "message": METHOD_NOT_ALLOWED_MESSAGE}, cors_headers)
    except ValidationError as e:
        logger.info(f"Rejected contact submission, invalid fields: {e.fields or 'body'}")
        return json_response(400, {"success": False, "message": VALIDATION_MESSAGE}, cors_headers)
    except Exception as e:
        logger.error(f"Error processing contact form: {str(e)}", exc_info=True)
        return json_response(500, {"success": False, "message": ERROR_MESSAGE}, cors_headers)
