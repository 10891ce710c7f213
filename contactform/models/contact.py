from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from typing import Annotated, Any, Dict, Optional
from datetime import datetime, timezone
from enum import Enum
import json

from contactform.core.errors import ValidationError

REQUIRED_FIELDS = ("name", "email", "phone", "subject", "message")

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _utcnow():
    return datetime.now(timezone.utc)


class Submission(BaseModel):
    """A validated contact-form record. Immutable once built."""
    model_config = ConfigDict(frozen=True, strict=True)

    name: RequiredText
    email: RequiredText
    phone: RequiredText
    subject: RequiredText
    message: RequiredText
    createdAt: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_payload(cls, payload: Any) -> "Submission":
        """
        Build a Submission from a decoded request body.

        Raises:
            ValidationError: payload is not an object, or any required field
                is missing, empty or not a string
        """
        if not isinstance(payload, dict):
            raise ValidationError()

        data = {field: payload.get(field) for field in REQUIRED_FIELDS}
        missing = [field for field, value in data.items() if not value]
        if missing:
            raise ValidationError(fields=missing)

        try:
            return cls(**data)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            raise ValidationError(fields=fields) from e

    @classmethod
    def from_json(cls, body: Optional[str]) -> "Submission":
        if not body:
            raise ValidationError()
        try:
            payload = json.loads(body)
        except (TypeError, ValueError) as e:
            raise ValidationError() from e
        return cls.from_payload(payload)

    def to_document(self) -> Dict[str, Any]:
        """MongoDB document for the contacts collection."""
        return self.model_dump()


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    OPTIONS = "OPTIONS"
    OTHER = "OTHER"

    @classmethod
    def from_raw(cls, method: Optional[str]) -> "HttpMethod":
        if not isinstance(method, str):
            return cls.OTHER
        try:
            return cls(method.upper())
        except ValueError:
            return cls.OTHER


class ContactRequest(BaseModel):
    """Platform-neutral request handed to the contact handler."""
    method: HttpMethod
    origin: Optional[str] = None
    body: Optional[str] = None


class ContactResponse(BaseModel):
    """Platform-neutral response returned by the contact handler."""
    status_code: int
    headers: Dict[str, str] = {}
    body: str = ""

    def json_body(self) -> Any:
        return json.loads(self.body) if self.body else None
