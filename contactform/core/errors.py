"""
Error taxonomy for the contact-form pipeline.

ValidationError and UnsupportedMethodError stop a request before any side
effect runs. StoreError and SendError describe a failed persist or notify
attempt; the request handler decides what they mean for the response.
"""


class ContactFormError(Exception):
    """Base class for all contact-form errors."""


class ValidationError(ContactFormError):
    """Missing, empty or unparseable submission fields (HTTP 400)."""

    def __init__(self, message="All fields are required", fields=None):
        super().__init__(message)
        self.fields = list(fields or [])


class UnsupportedMethodError(ContactFormError):
    """HTTP method other than POST on the contact route (HTTP 405)."""

    def __init__(self, method):
        super().__init__(f"Method not allowed: {method}")
        self.method = method


class StoreError(ContactFormError):
    """The submission could not be persisted."""


class SendError(ContactFormError):
    """The notification email could not be delivered (or timed out)."""
