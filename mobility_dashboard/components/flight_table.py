"""
Live flight table component.

Provides the table of flights currently observed by the backend.
"""

from typing import List

import pandas as pd
import streamlit as st

from mobility_dashboard.api.models import LiveFlight
from mobility_dashboard.config import DashboardConfig

__all__ = ["build_flight_table", "render_flight_table"]


def build_flight_table(flights: List[LiveFlight]) -> pd.DataFrame:
    """
    Prepare live flights for display.

    Args:
        flights: Live flights from the realtime endpoint.

    Returns:
        DataFrame with Callsign, Origin Region and Time (UTC, HH:MM:SS)
        columns. Unparseable timestamps are left blank.
    """
    columns = list(DashboardConfig.display.flight_columns)
    df = pd.DataFrame([flight.model_dump(include=set(columns)) for flight in flights], columns=columns)

    times = pd.to_datetime(df["timestamp"], errors="coerce", utc=True, format="ISO8601")
    df["timestamp"] = times.dt.strftime("%H:%M:%S").fillna("")

    return df.rename(
        columns={
            "callsign": "Callsign",
            "source_region": "Origin Region",
            "timestamp": "Time (UTC)",
        }
    )


def render_flight_table(flights: List[LiveFlight]) -> None:
    """
    Render the live flight table to Streamlit.

    Args:
        flights: Live flights from the realtime endpoint.
    """
    st.subheader("Live Flights")

    if not flights:
        st.info("No active flights detected")
        return

    st.dataframe(
        build_flight_table(flights),
        height=DashboardConfig.display.flight_table_height,
        use_container_width=True,
        hide_index=True,
    )
