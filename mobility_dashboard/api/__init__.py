"""
API module for communicating with the analytics backend.
"""

from mobility_dashboard.api.client import MobilityApiClient
from mobility_dashboard.api.models import FilesAvailable, Insights, LiveFlight, SystemStatus

__all__ = [
    "MobilityApiClient",
    "FilesAvailable",
    "Insights",
    "LiveFlight",
    "SystemStatus",
]
