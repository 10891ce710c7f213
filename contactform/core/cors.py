"""
CORS policy shared by the server and the serverless functions.

Known origins are echoed back; everything else gets the wildcard.
"""

from typing import Dict, Iterable, Optional

from contactform.core.config import get_settings

ALLOW_HEADERS = "Content-Type, Authorization, X-Requested-With"
ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
MAX_AGE = "86400"  # 24 hours cache for preflight requests


def get_cors_headers(request_origin: Optional[str],
                     allowed_origins: Optional[Iterable[str]] = None) -> Dict[str, str]:
    """
    Build CORS response headers for the given request origin.

    Args:
        request_origin: Value of the request's Origin header, if any
        allowed_origins: Allow-list to check against (defaults to settings)

    Returns:
        dict: Header name to value
    """
    if allowed_origins is None:
        allowed_origins = get_settings().allowed_origin_list

    origin = "*"
    if request_origin and request_origin in allowed_origins:
        origin = request_origin

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Max-Age": MAX_AGE,
    }
