"""
Migration anomaly service for the radar panel.

Compares each route's share of current traffic with its share of
historical traffic and reports the routes surging the most.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from mobility_dashboard.services.aggregation_service import records_to_frame, total_flights
from mobility_dashboard.types import AggregationRecord

logger = logging.getLogger(__name__)

__all__ = [
    "SURGE_THRESHOLD",
    "MAX_ANOMALIES",
    "AnomalyRoute",
    "has_comparable_totals",
    "get_historical_shares",
    "detect_migration_anomalies",
]

# Share gain over the baseline a route needs to count as a surge
SURGE_THRESHOLD = 0.05
MAX_ANOMALIES = 5


@dataclass(frozen=True)
class AnomalyRoute:
    """A route whose current traffic share exceeds its historical share."""

    source: str
    target: str
    current_share: float
    baseline_share: float
    deviation: float


def has_comparable_totals(
    current: Sequence[AggregationRecord], historical: Sequence[AggregationRecord]
) -> bool:
    """True when both periods carry at least one flight."""
    return total_flights(current) > 0 and total_flights(historical) > 0


def get_historical_shares(
    historical: Sequence[AggregationRecord],
) -> Dict[Tuple[str, str], float]:
    """
    Share of historical traffic per route.

    Records for the same route (e.g. one per year) are summed before
    dividing by the grand total.

    Args:
        historical: Batch aggregation records.

    Returns:
        Mapping of (source, normalised target) to a share in [0, 1].
        Empty when there is no historical traffic.
    """
    frame = records_to_frame(historical)
    total = int(frame["flight_count"].sum())

    if total == 0:
        return {}

    route_totals = frame.groupby(["source_region", "target_region"], sort=False)[
        "flight_count"
    ].sum()

    return {route: float(count) / total for route, count in route_totals.items()}


def detect_migration_anomalies(
    current: Sequence[AggregationRecord], historical: Sequence[AggregationRecord]
) -> List[AnomalyRoute]:
    """
    Find routes whose current traffic share surged past the baseline.

    Each current record is scored on its own (current records are not
    summed per route). Routes never seen historically have a baseline
    of 0, so new routes surface as soon as they pass the threshold.

    Args:
        current: Streaming aggregation records.
        historical: Batch aggregation records used as baseline.

    Returns:
        Up to MAX_ANOMALIES routes with deviation above SURGE_THRESHOLD,
        largest deviation first. Empty when either period has no traffic.
    """
    if not has_comparable_totals(current, historical):
        return []

    baseline = get_historical_shares(historical)
    scored = records_to_frame(current)
    total_current = int(scored["flight_count"].sum())

    scored["current_share"] = scored["flight_count"] / total_current
    scored["baseline_share"] = [
        baseline.get(route, 0.0)
        for route in zip(scored["source_region"], scored["target_region"])
    ]
    scored["deviation"] = scored["current_share"] - scored["baseline_share"]

    surging = (
        scored[scored["deviation"] > SURGE_THRESHOLD]
        .sort_values("deviation", ascending=False, kind="stable")
        .head(MAX_ANOMALIES)
    )

    logger.debug(
        "Scored %d current routes against %d baseline routes: %d surging",
        len(scored),
        len(baseline),
        len(surging),
    )

    return [
        AnomalyRoute(
            source=row.source_region,
            target=row.target_region,
            current_share=float(row.current_share),
            baseline_share=float(row.baseline_share),
            deviation=float(row.deviation),
        )
        for row in surging.itertuples(index=False)
    ]
