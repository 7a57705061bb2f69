"""
Status bar component for streaming control and refresh feedback.

Provides the streaming badge, the start/stop toggle, the CSV export
link and the next-update countdown.
"""

from typing import Callable, Optional

import streamlit as st

from mobility_dashboard.api.models import SystemStatus

__all__ = [
    "format_countdown",
    "render_countdown",
    "render_status_bar",
]


def format_countdown(seconds_left: int, is_syncing: bool) -> str:
    """
    Text shown next to the refresh timer.

    Args:
        seconds_left: Seconds until the next refresh.
        is_syncing: Whether a refresh has not completed yet.

    Returns:
        "Updating Data..." while syncing, otherwise "Next Update in N seconds".
    """
    if is_syncing:
        return "Updating Data..."
    return f"Next Update in {seconds_left} seconds"


def render_countdown(seconds_left: int, total: int, is_syncing: bool) -> None:
    """
    Render the refresh countdown with a progress bar.

    Args:
        seconds_left: Seconds until the next refresh.
        total: Length of the refresh cycle in seconds.
        is_syncing: Whether a refresh has not completed yet.
    """
    progress = seconds_left / total if total > 0 else 0.0
    st.progress(min(max(progress, 0.0), 1.0), text=format_countdown(seconds_left, is_syncing))


def render_status_bar(
    status: Optional[SystemStatus],
    export_url: str,
    on_toggle: Callable[[bool], None],
) -> None:
    """
    Render streaming badge, toggle button and export link.

    Args:
        status: Last known backend status, None if never fetched.
        export_url: URL of the batch CSV export.
        on_toggle: Callback receiving the current streaming flag.
    """
    streaming_active = bool(status and status.streaming_active)

    col1, col2, col3 = st.columns(3)

    with col1:
        badge_class = "active" if streaming_active else "stopped"
        badge_text = "Streaming Active" if streaming_active else "Streaming Stopped"
        st.markdown(
            f'<span class="streaming-badge {badge_class}">{badge_text}</span>',
            unsafe_allow_html=True,
        )

    with col2:
        st.button(
            "Stop" if streaming_active else "Start",
            icon=":material/stop:" if streaming_active else ":material/play_arrow:",
            on_click=on_toggle,
            args=(streaming_active,),
            use_container_width=True,
        )

    with col3:
        st.link_button("Export CSV", export_url, icon=":material/download:")
