"""
Errors raised by the content service client.

Each error carries a ``user_message`` suitable for showing to the learner
as-is; the parsing layer never sees these.
"""
from __future__ import annotations

CONNECTIVITY_MESSAGE = (
    "Unable to connect to the AI service. "
    "Please check your internet connection and try again."
)


class ContentSourceError(Exception):
    """Base class for content service failures."""

    def __init__(self, user_message: str, status_code: int | None = None):
        super().__init__(user_message)
        self.user_message = user_message
        self.status_code = status_code


class ContentSourceConnectionError(ContentSourceError):
    """The service could not be reached (DNS, refused, timeout)."""

    def __init__(self, user_message: str = CONNECTIVITY_MESSAGE):
        super().__init__(user_message)


class ContentSourceServiceError(ContentSourceError):
    """The service answered, but with an error status or unusable body."""

    @classmethod
    def from_status(cls, status_code: int, message: str | None = None) -> ContentSourceServiceError:
        if not message:
            message = (
                f"Server error ({status_code}). The AI service is currently experiencing "
                "issues. Please try again in a few moments."
            )
        return cls(message, status_code=status_code)
