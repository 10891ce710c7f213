"""
Helpers shared by the serverless function handlers.

One event loop is kept for the life of the container so the cached MongoDB
client stays usable across warm invocations.
"""

import asyncio
import base64
import json
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from contactform.core.config import get_settings
from contactform.core.logging_config import configure_logging
from contactform.models.contact import ContactRequest, ContactResponse, HttpMethod

load_dotenv()
configure_logging(get_settings().log_level)

_loop = None


def run(coro):
    """Run a coroutine on the container-wide event loop."""
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
        asyncio.set_event_loop(_loop)
    return _loop.run_until_complete(coro)


def get_header(event: Dict[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup on a proxy event."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def get_text_header(event: Dict[str, Any], name: str) -> Optional[str]:
    value = get_header(event, name)
    return value if isinstance(value, str) else None


def get_body(event: Dict[str, Any]) -> Optional[str]:
    """
    Request body as text.

    Console test events may carry an already-decoded object; it is re-encoded
    as JSON. Anything that can't be turned into text gives None (400 downstream).
    """
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True).decode("utf-8", errors="replace")
        except (TypeError, ValueError):
            return None
    if isinstance(body, (dict, list)):
        return json.dumps(body)
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    return None


def to_contact_request(event: Dict[str, Any]) -> ContactRequest:
    return ContactRequest(
        method=HttpMethod.from_raw(event.get("httpMethod")),
        origin=get_text_header(event, "origin"),
        body=get_body(event),
    )


def to_proxy_response(response: ContactResponse) -> Dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }


def json_proxy_response(status_code: int, headers: Dict[str, str], payload: Dict[str, Any]) -> Dict[str, Any]:
    headers = dict(headers)
    headers["Content-Type"] = "application/json"
    return {"statusCode": status_code, "headers": headers, "body": json.dumps(payload)}
