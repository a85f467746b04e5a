"""
Domain Errors

Failure taxonomy shared by the three lookup stages. Every stage raises one of
these and the orchestrating use case lets it propagate untouched.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PassLookupError(DomainError):
    """Base class for failures of the pass lookup pipeline."""


class TransportError(PassLookupError):
    """Raised when a request could not be sent or no response was received."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(
            f"Failed to communicate with {url}: {cause}",
            {"url": url, "error": str(cause)},
        )


class UpstreamError(PassLookupError):
    """Raised when an upstream service answers with a non-success status."""

    def __init__(self, url: str, status_code: int, body: str, operation: str):
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Status Code {status_code} when {operation}. Response: {body}",
            {"url": url, "status_code": status_code, "body": body},
        )


class ParseError(PassLookupError):
    """Raised when a response body is not JSON or lacks an expected field."""

    def __init__(self, url: str, message: str, field: Optional[str] = None):
        self.url = url
        self.field = field
        super().__init__(message, {"url": url, "field": field})
