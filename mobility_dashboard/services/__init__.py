"""
Services module for data loading and processing.

Provides aggregation normalisation, the heatmap matrix, migration
anomaly detection and the refresh cycle for the dashboard.
"""

from mobility_dashboard.services.aggregation_service import (
    UNKNOWN_REGION,
    normalize_target,
    records_to_frame,
    route_key,
    total_flights,
)
from mobility_dashboard.services.anomaly_service import (
    MAX_ANOMALIES,
    SURGE_THRESHOLD,
    AnomalyRoute,
    detect_migration_anomalies,
    get_historical_shares,
    has_comparable_totals,
)
from mobility_dashboard.services.matrix_service import RegionMatrix, build_region_matrix
from mobility_dashboard.services.refresh_service import (
    RefreshSnapshot,
    SyncOutcome,
    run_sync_cycle,
    load_historical,
    seconds_until_refresh,
    sync_snapshot,
    toggle_streaming,
)

__all__ = [
    # Aggregation service
    "UNKNOWN_REGION",
    "normalize_target",
    "records_to_frame",
    "route_key",
    "total_flights",
    # Matrix service
    "RegionMatrix",
    "build_region_matrix",
    # Anomaly service
    "SURGE_THRESHOLD",
    "MAX_ANOMALIES",
    "AnomalyRoute",
    "detect_migration_anomalies",
    "get_historical_shares",
    "has_comparable_totals",
    # Refresh service
    "RefreshSnapshot",
    "SyncOutcome",
    "run_sync_cycle",
    "sync_snapshot",
    "load_historical",
    "seconds_until_refresh",
    "toggle_streaming",
]
