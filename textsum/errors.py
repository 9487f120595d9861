"""
Errors raised by textsum.

Input problems are caught before any network call. Failures from the
chat-completion API are wrapped in LLMError subclasses and are never
retried by the pipeline.
"""

from typing import Optional


class TextSumError(Exception):
    """Base class for all textsum errors."""


class InputValidationError(TextSumError, ValueError):
    """Bad text or bad option values."""


class LengthBudgetExceeded(TextSumError):
    """Summary still over budget after the last attempt (strict mode only)."""

    def __init__(self, length: int, budget: int, attempts: int):
        self.length = length
        self.budget = budget
        self.attempts = attempts
        super().__init__(
            f"Summary length {length} exceeds budget {budget} after {attempts} attempts"
        )


class SessionClosedError(TextSumError):
    """Raised when a closed conversation session is used."""


class LLMError(TextSumError):
    """Something went wrong talking to the chat-completion API."""


class LLMTransportError(LLMError):
    """Connection, DNS or timeout failure."""


class APIError(LLMError):
    """Non-2xx response from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(APIError):
    """401/403 from the API (missing or invalid key)."""


class LLMResponseError(LLMError):
    """The API answered 2xx but the payload was not usable."""
