"""
Serverless handler for the contact form (Netlify / Lambda proxy events).
"""

import logging
from typing import Any, Dict

from contactform.core.contact_handler import VALIDATION_MESSAGE, handle_contact_request, json_response
from contactform.core.cors import get_cors_headers
from contactform.functions.runtime import run, to_contact_request, to_proxy_response
from contactform.services.email_service import NotificationSender
from contactform.services.submission_store import SubmissionStore

logger = logging.getLogger(__name__)

# Initialized once at module level (reused across invocations)
store = SubmissionStore()
sender = NotificationSender()


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Handle a contact form request.

    Expected event format:
    {
        "httpMethod": "POST",
        "headers": {"origin": "https://covechildcare.co.uk"},
        "body": "{\"name\": ..., \"email\": ..., \"phone\": ..., \"subject\": ..., \"message\": ...}",
        "isBase64Encoded": false
    }
    """
    try:
        request = to_contact_request(event)
    except Exception as e:
        logger.warning(f"Malformed contact event: {str(e)}")
        response = json_response(400, {"success": False, "message": VALIDATION_MESSAGE}, get_cors_headers(None))
        return to_proxy_response(response)

    response = run(handle_contact_request(request, store, sender))
    logger.info(f"Contact function responded with {response.status_code}")
    return to_proxy_response(response)
