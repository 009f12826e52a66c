"""Custom exceptions for the Cheshire Cat API client."""

from typing import Any, Optional


class CCatError(Exception):
    """Base exception for all Cheshire Cat API client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UploadMissingFileError(CCatError):
    """Raised when an upload is attempted without a file."""

    def __init__(self, message: str = "missing file to upload") -> None:
        super().__init__(message)


class InvalidURLError(CCatError):
    """Raised when the configured base URL cannot produce a request URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid url {url!r}: {reason}")
        self.url = url


class APIError(CCatError):
    """Base exception for errors reported by the Cheshire Cat server."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class APIFieldErrors(APIError):
    """Raised when the server answers with a list of structured field errors."""

    def __init__(self, errors: list[Any], status_code: int, body: str = "") -> None:
        self.errors = errors
        lines = ["API error:"]
        lines.extend(str(err) for err in errors)
        super().__init__("\n".join(lines), status_code=status_code, body=body)


class APIMessageError(APIError):
    """Raised when the server answers with a single error message."""


class UnknownAPIError(APIError):
    """Raised when an error body matches none of the known error shapes."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"unknown error: {status_code} - {body}", status_code=status_code, body=body)


class AuthenticationError(UnknownAPIError):
    """Raised when an unclassified error carries a 401 or 403 status."""
