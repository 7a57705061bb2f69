"""
Main dashboard view - live regional mobility.

Owns the refresh lifecycle: the historical baseline is loaded once
per session, live data is synced on the first run and then re-synced
every refresh interval by a Streamlit fragment.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import streamlit as st

from mobility_dashboard.api.client import MobilityApiClient
from mobility_dashboard.charts.heatmap_chart import render_region_heatmap
from mobility_dashboard.components.flight_table import render_flight_table
from mobility_dashboard.components.insights_panel import render_insights_panel
from mobility_dashboard.components.migration_radar import render_migration_radar
from mobility_dashboard.components.status_bar import render_countdown, render_status_bar
from mobility_dashboard.config import DashboardConfig
from mobility_dashboard.exceptions import MobilityDashboardError
from mobility_dashboard.services.matrix_service import build_region_matrix
from mobility_dashboard.services.refresh_service import (
    RefreshSnapshot,
    load_historical,
    run_sync_cycle,
    seconds_until_refresh,
    toggle_streaming,
)

logger = logging.getLogger(__name__)

HISTORICAL_KEY = "historical_aggregates"
SNAPSHOT_KEY = "refresh_snapshot"
SKIP_SYNC_KEY = "skip_next_sync"
ERROR_KEY = "sync_error"
# Start of the current live fragment run, which also restarts its timer
CYCLE_STARTED_KEY = "cycle_started_at"
SYNCING_KEY = "sync_in_flight"


def _sync_into_session(client: MobilityApiClient) -> None:
    """Refresh the snapshot; on failure keep the previous one."""
    st.session_state[SYNCING_KEY] = True
    try:
        outcome = run_sync_cycle(client, previous=st.session_state.get(SNAPSHOT_KEY))
    finally:
        st.session_state[SYNCING_KEY] = False

    st.session_state[SNAPSHOT_KEY] = outcome.snapshot
    if outcome.error:
        st.session_state[ERROR_KEY] = outcome.error
    else:
        st.session_state.pop(ERROR_KEY, None)


def _make_toggle_handler(client: MobilityApiClient):
    def _on_toggle(streaming_active: bool) -> None:
        try:
            st.session_state[SNAPSHOT_KEY] = toggle_streaming(
                client,
                streaming_active,
                previous=st.session_state.get(SNAPSHOT_KEY),
            )
            st.session_state[SKIP_SYNC_KEY] = True
            st.session_state.pop(ERROR_KEY, None)
        except MobilityDashboardError as error:
            logger.exception("Toggle failed: %s", error)
            st.session_state[ERROR_KEY] = f"Toggle failed: {error}"

    return _on_toggle


@st.fragment(run_every=1)
def _render_countdown() -> None:
    interval = DashboardConfig.refresh.interval_seconds
    cycle_started_at: Optional[datetime] = st.session_state.get(CYCLE_STARTED_KEY)
    render_countdown(
        seconds_until_refresh(cycle_started_at, interval=interval),
        interval,
        is_syncing=cycle_started_at is None or st.session_state.get(SYNCING_KEY, False),
    )


@st.fragment(run_every=DashboardConfig.refresh.interval_seconds)
def _render_live_section(client: MobilityApiClient) -> None:
    st.session_state[CYCLE_STARTED_KEY] = datetime.now(timezone.utc)

    # A toggle callback has just synced; do not fetch twice
    if not st.session_state.pop(SKIP_SYNC_KEY, False):
        _sync_into_session(client)

    snapshot: Optional[RefreshSnapshot] = st.session_state.get(SNAPSHOT_KEY)

    render_status_bar(
        snapshot.status if snapshot else None,
        client.export_csv_url(),
        _make_toggle_handler(client),
    )

    if ERROR_KEY in st.session_state:
        st.error(st.session_state[ERROR_KEY])

    if snapshot is None:
        st.warning("Waiting for the analytics backend...")
        return

    col1, col2 = st.columns(2)

    with col1:
        render_flight_table(snapshot.flights)

    with col2:
        st.subheader("Regional Mobility Matrix")
        render_region_heatmap(build_region_matrix(snapshot.streaming))

    st.markdown("---")
    render_migration_radar(snapshot.streaming, st.session_state[HISTORICAL_KEY])

    render_insights_panel(snapshot.insights)


def render_main_view(client: MobilityApiClient) -> None:
    """
    Render the main dashboard view.

    Args:
        client: Backend API client shared across reruns.
    """
    if HISTORICAL_KEY not in st.session_state:
        st.session_state[HISTORICAL_KEY] = load_historical(client)

    title_col, timer_col = st.columns([3, 1])
    with title_col:
        st.title("Air Traffic Mobility")
    with timer_col:
        _render_countdown()

    _render_live_section(client)
