from typing import Any, Dict

from contactform.core.cors import get_cors_headers
from contactform.functions.runtime import get_header, json_proxy_response


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    headers = get_cors_headers(get_header(event, "origin"))

    if (event.get("httpMethod") or "").upper() == "OPTIONS":
        return {"statusCode": 204, "headers": headers, "body": ""}

    return json_proxy_response(200, headers, {"status": "ok"})
