"""
Custom exceptions for the Challonge client.

These exceptions provide clear error categories for API operations:
- ChallongeError: Base exception for all client errors
- ConfigurationError: Missing or invalid configuration
- PreconditionError: A required local identifier or parameter is missing
- TransportError: The request could not be completed
- HTTPError: The API answered with a non-success status
- ParseError: The response body does not have the expected shape
"""

from typing import List, Optional


class ChallongeError(Exception):
    """Base exception for all Challonge client errors."""
    pass


class ConfigurationError(ChallongeError):
    """Missing or invalid client configuration."""
    pass


class PreconditionError(ChallongeError):
    """Operation invoked without a required identifier or parameter."""
    pass


class TransportError(ChallongeError):
    """Failed to complete the HTTP exchange."""

    def __init__(self, message: str, method: str, path: str):
        super().__init__(message)
        self.method = method
        self.path = path


class HTTPError(TransportError):
    """The API returned a status code outside the 2xx range."""

    def __init__(
        self,
        status_code: int,
        method: str,
        path: str,
        errors: Optional[List[str]] = None,
    ):
        self.status_code = status_code
        self.errors = errors or []
        message = f"{method} {path} failed with status {status_code}"
        if self.errors:
            message += ": " + "; ".join(self.errors)
        super().__init__(message, method, path)


class ParseError(ChallongeError):
    """Response body is not valid JSON of the expected shape."""
    pass
