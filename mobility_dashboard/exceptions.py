"""
Custom exceptions for the mobility_dashboard package.

Provides a hierarchy of exceptions for clear error handling
of backend communication. The analytical services never raise:
empty or zero-total input yields an empty result instead.
"""

from typing import Any, Optional


class MobilityDashboardError(Exception):
    """Base exception for all dashboard errors."""

    pass


class MobilityAPIError(MobilityDashboardError):
    """Raised when the analytics backend returns an HTTP error or cannot be reached."""

    def __init__(
        self, status_code: int, message: str = "", payload: Optional[Any] = None
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.message = message or f"Analytics API returned status code {status_code}"
        super().__init__(self.message)


class InvalidPayloadError(MobilityDashboardError):
    """Raised when a response body does not match the documented shape."""

    def __init__(self, endpoint: str, message: str = "") -> None:
        self.endpoint = endpoint
        self.message = message or f"Unexpected response shape from {endpoint}"
        super().__init__(self.message)
