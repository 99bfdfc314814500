# exceptions/network.py
"""
Custom exceptions for feed transport operations.
"""

from typing import Optional


class NetworkFailureError(Exception):
    """
    Base exception for failed feed requests.

    The message is human readable and is surfaced as-is on the owning
    list-state engine's error field.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class RequestTimeoutError(NetworkFailureError):
    """
    Raised when a feed request exceeds its timeout
    """

    def __init__(self, timeout: float, url: Optional[str] = None):
        super().__init__(f"Request timed out after {timeout}s", url)
        self.timeout = timeout


class HTTPStatusError(NetworkFailureError):
    """
    Raised when the feed answers with a non-2xx status
    """

    def __init__(self, status_code: int, reason: str = "", url: Optional[str] = None):
        super().__init__(f"HTTP error {status_code}: {reason}".rstrip(": "), url)
        self.status_code = status_code
        self.reason = reason
