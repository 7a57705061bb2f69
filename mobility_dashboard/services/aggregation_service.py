"""
Aggregation service for region-pair records.

Provides the shared normalisation used by the heatmap and the
migration radar: missing destinations become a sentinel label and
records become a three-column DataFrame keyed by region pair.
"""

from typing import Iterable, Optional, Tuple

import pandas as pd

from mobility_dashboard.types import AggregationRecord

__all__ = [
    "UNKNOWN_REGION",
    "AGGREGATION_COLUMNS",
    "normalize_target",
    "route_key",
    "records_to_frame",
    "total_flights",
]

UNKNOWN_REGION = "Unknown"

AGGREGATION_COLUMNS = ["source_region", "target_region", "flight_count"]


def normalize_target(target_region: Optional[str]) -> str:
    """
    Map a missing destination to the sentinel label.

    Args:
        target_region: Destination label, None, or empty string.

    Returns:
        The label itself, or "Unknown" when it is missing or empty.
    """
    if not target_region or pd.isna(target_region):
        return UNKNOWN_REGION
    return target_region


def route_key(record: AggregationRecord) -> Tuple[str, str]:
    """Return the (source, normalised target) pair a record counts towards."""
    return record["source_region"], normalize_target(record.get("target_region"))


def records_to_frame(records: Iterable[AggregationRecord]) -> pd.DataFrame:
    """
    Convert aggregation records to a DataFrame in input order.

    Args:
        records: Aggregation records as delivered by the backend.

    Returns:
        DataFrame with source_region, target_region (normalised) and
        flight_count columns. Empty input keeps the columns.
    """
    rows = [(*route_key(record), int(record["flight_count"])) for record in records]
    frame = pd.DataFrame(rows, columns=AGGREGATION_COLUMNS)
    frame["flight_count"] = frame["flight_count"].astype("int64")
    return frame


def total_flights(records: Iterable[AggregationRecord]) -> int:
    """Sum of flight_count across all records."""
    return sum(int(record["flight_count"]) for record in records)
