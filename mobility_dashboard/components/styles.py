"""
Styling module for dashboard appearance.

Provides functions for applying page configuration and custom CSS.
"""

import streamlit as st

from mobility_dashboard.config import DashboardConfig


def apply_page_config() -> None:
    """
    Apply Streamlit page configuration.

    Must be called before any other Streamlit commands.
    """
    config = DashboardConfig.page
    st.set_page_config(
        page_title=config.title,
        page_icon=config.icon,
        layout=config.layout,
        initial_sidebar_state=config.sidebar_state,
    )


def apply_custom_css() -> None:
    """
    Apply custom CSS styling to the dashboard.

    Injects classes for the streaming badge and the migration radar
    cards based on settings defined in DashboardConfig.style.
    """
    style = DashboardConfig.style

    css = f"""
    <style>
        /* Streaming status badge */
        .streaming-badge {{
            display: inline-block;
            padding: 0.4rem 0.8rem;
            border-radius: 20px;
            font-size: 0.85rem;
            font-weight: bold;
        }}
        .streaming-badge.active {{
            background: {style.badge_active_bg};
            color: {style.badge_active_fg};
        }}
        .streaming-badge.stopped {{
            background: {style.badge_stopped_bg};
            color: {style.badge_stopped_fg};
        }}

        /* Migration radar surge card */
        .surge-card {{
            border: 1px solid {style.surge_card_border};
            background: {style.surge_card_bg};
            border-radius: 8px;
            padding: 1rem;
            display: flex;
            flex-direction: column;
            gap: 0.5rem;
            margin-bottom: 1rem;
        }}
        .surge-card .surge-header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
        }}
        .surge-card .surge-route {{
            font-weight: bold;
            color: {style.surge_title_color};
        }}
        .surge-card .surge-badge {{
            background: {style.surge_badge_bg};
            color: white;
            padding: 2px 8px;
            border-radius: 12px;
            font-size: 0.75rem;
            font-weight: bold;
        }}
        .surge-card .surge-body {{
            font-size: 0.875rem;
            color: {style.surge_text_color};
        }}
        .surge-card .surge-baseline {{
            font-size: 0.75rem;
            opacity: 0.8;
        }}
        .surge-card .surge-bar {{
            width: 100%;
            background: {style.surge_bar_bg};
            height: 4px;
            border-radius: 2px;
        }}
        .surge-card .surge-bar-fill {{
            background: {style.surge_bar_fg};
            height: 100%;
            border-radius: 2px;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
