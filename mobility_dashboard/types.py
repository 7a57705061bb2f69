"""
Type definitions for the dashboard module.

Provides TypedDict classes for the record shapes delivered by the
analytics backend and passed between services and components.
"""

from typing import Optional, TypedDict


class _AggregationRecordBase(TypedDict):
    """Required aggregation fields."""

    source_region: str
    target_region: Optional[str]
    flight_count: int


class AggregationRecord(_AggregationRecordBase, total=False):
    """Pre-summarized flight count between two regions."""

    # Provenance only, never used in computation
    time_window: str
    year: str
