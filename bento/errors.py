"""Errors raised by the Bento client and the business-error classifier."""

import json
from typing import Optional

from pydantic import BaseModel, ValidationError


class BentoClientError(Exception):
    """Base class for every error raised by this package."""


class TransportError(BentoClientError):
    """Network-level failure (connection, timeout, TLS)."""


class InvalidResponseError(BentoClientError):
    """Response body is not JSON, or does not fit the expected record."""

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class MissingAuthTokenError(BentoClientError):
    """Session bootstrap returned no Authorization header."""


class BusinessError(BentoClientError):
    """Error payload returned by Bento despite a successful HTTP exchange."""

    def __init__(self, message: str = "", error_code: str = ""):
        super().__init__(f"Bento Error: [{message}], [{error_code}]")
        self.message = message
        self.error_code = error_code


class UnexpectedStateError(BentoClientError):
    """Bento accepted an update but echoed back a different card status."""

    def __init__(self, expected: str, actual: Optional[str], card=None):
        super().__init__(
            f"Bento returned success setting status {expected}, but card's status is: {actual}"
        )
        self.expected = expected
        self.actual = actual
        self.card = card


class UnboundCardError(BentoClientError):
    """Card operation attempted on a card not obtained through a Session."""


class BentoError(BaseModel):
    """Shape of the error envelope Bento returns."""

    message: Optional[str] = None
    error: Optional[str] = None


def check_error(body: bytes) -> Optional[BusinessError]:
    """Return a BusinessError if body is a Bento error envelope, else None.

    Anything that does not decode as a JSON object of the envelope's shape
    is treated as a regular payload.
    """
    try:
        data = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    try:
        envelope = BentoError.model_validate(data)
    except ValidationError:
        return None

    if envelope.message or envelope.error:
        return BusinessError(envelope.message or "", envelope.error or "")
    return None
