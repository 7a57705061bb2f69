"""
Refresh service for periodic dashboard data loading.

Fetches the live data sources concurrently once per refresh cycle,
loads the historical baseline once per session, and drives the
streaming on/off toggle.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from mobility_dashboard.api.client import MobilityApiClient
from mobility_dashboard.api.models import Insights, LiveFlight, SystemStatus
from mobility_dashboard.config import DashboardConfig
from mobility_dashboard.exceptions import MobilityDashboardError
from mobility_dashboard.types import AggregationRecord

logger = logging.getLogger(__name__)

__all__ = [
    "RefreshSnapshot",
    "SyncOutcome",
    "run_sync_cycle",
    "sync_snapshot",
    "load_historical",
    "seconds_until_refresh",
    "toggle_streaming",
]


@dataclass(frozen=True)
class RefreshSnapshot:
    """Everything fetched in one refresh cycle."""

    status: SystemStatus
    streaming: List[AggregationRecord]
    flights: List[LiveFlight]
    insights: Optional[Insights]
    synced_at: datetime


def _fetch_insights(client: MobilityApiClient) -> Optional[Insights]:
    """Insights are optional; a failure must not abort the cycle."""
    try:
        return client.get_insights()
    except MobilityDashboardError as error:
        logger.warning("Insights unavailable, continuing without them: %s", error)
        return None


def sync_snapshot(
    client: MobilityApiClient, previous: Optional[RefreshSnapshot] = None
) -> RefreshSnapshot:
    """
    Fetch status, streaming aggregates, live flights and insights.

    All four requests run concurrently and the call returns only after
    every one of them has settled.

    Args:
        client: Backend API client.
        previous: Last good snapshot. Its insights are kept when the
            insights fetch fails.

    Returns:
        RefreshSnapshot stamped with the completion time (UTC).

    Raises:
        MobilityDashboardError: If status, streaming or live flights fail.
    """
    with ThreadPoolExecutor(
        max_workers=DashboardConfig.refresh.fetch_workers,
        thread_name_prefix="mobility-sync",
    ) as executor:
        status_future = executor.submit(client.get_status)
        streaming_future = executor.submit(client.get_streaming)
        flights_future = executor.submit(client.get_realtime)
        insights_future = executor.submit(_fetch_insights, client)

    insights = insights_future.result()
    if insights is None and previous is not None:
        insights = previous.insights

    snapshot = RefreshSnapshot(
        status=status_future.result(),
        streaming=streaming_future.result(),
        flights=flights_future.result(),
        insights=insights,
        synced_at=datetime.now(timezone.utc),
    )
    logger.info(
        "Synced: %d aggregates, %d live flights, streaming %s",
        len(snapshot.streaming),
        len(snapshot.flights),
        "active" if snapshot.status.streaming_active else "stopped",
    )
    return snapshot


@dataclass(frozen=True)
class SyncOutcome:
    """Result of one refresh attempt, successful or not."""

    snapshot: Optional[RefreshSnapshot]
    attempted_at: datetime
    error: Optional[str] = None


def run_sync_cycle(
    client: MobilityApiClient, previous: Optional[RefreshSnapshot] = None
) -> SyncOutcome:
    """
    Run one refresh attempt and record when it happened.

    A failed attempt keeps the previous snapshot but still stamps
    attempted_at, so the countdown restarts on every cycle.

    Args:
        client: Backend API client.
        previous: Snapshot currently on screen, None before the first sync.

    Returns:
        SyncOutcome with the snapshot to display and the error message, if any.
    """
    attempted_at = datetime.now(timezone.utc)
    try:
        snapshot = sync_snapshot(client, previous=previous)
    except MobilityDashboardError as error:
        logger.exception("Sync failed: %s", error)
        return SyncOutcome(previous, attempted_at, f"Sync failed: {error}")

    return SyncOutcome(snapshot, attempted_at)


def load_historical(
    client: MobilityApiClient, limit: Optional[int] = None
) -> List[AggregationRecord]:
    """
    Load the historical baseline used by the migration radar.

    Args:
        client: Backend API client.
        limit: Maximum records to request. Uses DashboardConfig.api.batch_limit if not specified.

    Returns:
        Batch aggregation records, or an empty list if loading failed.
    """
    if limit is None:
        limit = DashboardConfig.api.batch_limit

    try:
        return client.get_batch_regions(limit)
    except MobilityDashboardError as error:
        logger.exception("Failed to load batch history: %s", error)
        return []


def seconds_until_refresh(
    cycle_started_at: Optional[datetime],
    now: Optional[datetime] = None,
    interval: Optional[int] = None,
) -> int:
    """
    Countdown to the next refresh.

    Args:
        cycle_started_at: Start of the last refresh attempt, None before the first one.
        now: Current time (UTC). Defaults to the wall clock.
        interval: Refresh period in seconds. Uses DashboardConfig.refresh.interval_seconds if not specified.

    Returns:
        Whole seconds remaining, clamped to [0, interval].
    """
    if interval is None:
        interval = DashboardConfig.refresh.interval_seconds
    if cycle_started_at is None:
        return 0
    if now is None:
        now = datetime.now(timezone.utc)

    elapsed = int((now - cycle_started_at).total_seconds())
    return max(0, min(interval, interval - elapsed))


def toggle_streaming(
    client: MobilityApiClient,
    streaming_active: bool,
    settle_seconds: Optional[float] = None,
    previous: Optional[RefreshSnapshot] = None,
) -> RefreshSnapshot:
    """
    Stop streaming if it is running, start it otherwise, then re-sync.

    Args:
        client: Backend API client.
        streaming_active: Streaming flag from the last known status.
        settle_seconds: Pause before re-syncing so the backend flag propagates.
        previous: Snapshot currently on screen, passed on to sync_snapshot().

    Returns:
        Fresh RefreshSnapshot reflecting the new streaming state.
    """
    if settle_seconds is None:
        settle_seconds = DashboardConfig.refresh.toggle_settle_seconds

    if streaming_active:
        client.stop_streaming()
    else:
        client.start_streaming()

    if settle_seconds > 0:
        time.sleep(settle_seconds)

    return sync_snapshot(client, previous=previous)
