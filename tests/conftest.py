"""
Pytest fixtures for dashboard tests.

Provides common aggregation records and backend doubles used
across dashboard test modules.
"""

from typing import Any, Dict, List

import pytest

from fakes import FakeClient
from mobility_dashboard.exceptions import MobilityAPIError


@pytest.fixture
def current_records() -> List[Dict[str, Any]]:
    """Streaming aggregates: EU->AS surges against the baseline."""
    return [
        {"source_region": "EU", "target_region": "AS", "flight_count": 60},
        {"source_region": "EU", "target_region": "NA", "flight_count": 40},
    ]


@pytest.fixture
def historical_records() -> List[Dict[str, Any]]:
    """Batch aggregates for the same routes."""
    return [
        {"source_region": "EU", "target_region": "AS", "flight_count": 20, "year": "2022"},
        {"source_region": "EU", "target_region": "NA", "flight_count": 80, "year": "2022"},
    ]


@pytest.fixture
def mixed_records() -> List[Dict[str, Any]]:
    """Aggregates with a missing destination and unsorted regions."""
    return [
        {"source_region": "NA", "target_region": "EU", "flight_count": 12},
        {"source_region": "EU", "target_region": None, "flight_count": 3},
        {"source_region": "AS", "target_region": "EU", "flight_count": 30, "time_window": "10:00-10:05"},
    ]


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def api_error() -> MobilityAPIError:
    return MobilityAPIError(503, "503 Server Error")
