"""
Migration radar component.

Shows routes whose current share of traffic surged past their
historical baseline, one card per route.
"""

import html
import textwrap
from typing import List, Sequence

import streamlit as st

from mobility_dashboard.config import DashboardConfig
from mobility_dashboard.services.anomaly_service import (
    AnomalyRoute,
    detect_migration_anomalies,
    has_comparable_totals,
)
from mobility_dashboard.types import AggregationRecord

__all__ = [
    "surge_bar_percent",
    "format_surge_card",
    "render_migration_radar",
]


def surge_bar_percent(deviation: float) -> float:
    """
    Width of the surge progress bar.

    Args:
        deviation: Share gain over the baseline (0.1 = 10 points).

    Returns:
        Percentage in [0, 100]; a deviation of ChartConfig.radar_full_scale fills the bar.
    """
    full_scale = DashboardConfig.charts.radar_full_scale
    return max(0.0, min(deviation / full_scale * 100, 100.0))


def format_surge_card(anomaly: AnomalyRoute) -> str:
    """
    Build the HTML for one surge card.

    Args:
        anomaly: Route reported by detect_migration_anomalies().

    Returns:
        HTML snippet styled by the .surge-card CSS classes.
    """
    return textwrap.dedent(f"""
    <div class="surge-card">
        <div class="surge-header">
            <span class="surge-route">{html.escape(anomaly.source)} ➝ {html.escape(anomaly.target)}</span>
            <span class="surge-badge">+{anomaly.deviation * 100:.1f}% Surge</span>
        </div>
        <div class="surge-body">
            Currently <b>{anomaly.current_share * 100:.1f}%</b> of all traffic
            <div class="surge-baseline">(Historical Avg: {anomaly.baseline_share * 100:.1f}%)</div>
        </div>
        <div class="surge-bar">
            <div class="surge-bar-fill" style="width: {surge_bar_percent(anomaly.deviation):.0f}%"></div>
        </div>
    </div>
    """).strip()


def _render_cards(anomalies: List[AnomalyRoute]) -> None:
    columns = st.columns(DashboardConfig.display.radar_columns)
    for i, anomaly in enumerate(anomalies):
        with columns[i % len(columns)]:
            st.markdown(format_surge_card(anomaly), unsafe_allow_html=True)


def render_migration_radar(
    current: Sequence[AggregationRecord], historical: Sequence[AggregationRecord]
) -> None:
    """
    Render the migration radar section.

    Nothing is rendered when either period has no traffic, since there
    is no baseline to compare against.

    Args:
        current: Streaming aggregation records.
        historical: Batch aggregation records.
    """
    if not has_comparable_totals(current, historical):
        return

    anomalies = detect_migration_anomalies(current, historical)

    st.subheader("Migration Radar")
    st.caption("Vs Historical Baseline")

    if anomalies:
        _render_cards(anomalies)
    else:
        st.info(
            "No significant migration anomalies detected. "
            "Traffic flows are within historical norms."
        )
