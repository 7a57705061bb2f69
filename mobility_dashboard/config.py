"""
Dashboard configuration module.

Centralizes all configuration values, magic numbers, and defaults
used throughout the dashboard application. Backend location and
refresh cadence can be overridden from the environment (or a .env file).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class PageConfig:
    """Streamlit page configuration."""

    title: str = "Air Traffic Mobility"
    icon: str = "airplane"
    layout: str = "wide"
    sidebar_state: str = "collapsed"


@dataclass(frozen=True)
class ApiConfig:
    """Analytics backend connection settings."""

    base_url: str = os.getenv("MOBILITY_API_URL", "http://localhost:8000")
    timeout_seconds: float = float(os.getenv("MOBILITY_API_TIMEOUT", "10"))
    retries: int = 3
    backoff_factor: float = 0.3

    # Historical baseline is loaded once per session
    batch_limit: int = int(os.getenv("MOBILITY_BATCH_LIMIT", "1000"))


@dataclass(frozen=True)
class RefreshConfig:
    """Polling cadence for live data."""

    interval_seconds: int = int(os.getenv("MOBILITY_REFRESH_SECONDS", "90"))
    fetch_workers: int = 4
    # Delay after a streaming toggle before re-syncing
    toggle_settle_seconds: float = 0.5


@dataclass(frozen=True)
class ChartConfig:
    """Default chart configuration values."""

    heatmap_color_scale: str = "Blues"
    heatmap_min_height: int = 400
    heatmap_row_height: int = 48
    # Deviation that fills the radar progress bar completely
    radar_full_scale: float = 0.2


@dataclass(frozen=True)
class DisplayConfig:
    """Display and formatting configuration."""

    flight_table_height: int = 400
    flight_columns: tuple = ("callsign", "source_region", "timestamp")
    radar_columns: int = 3


@dataclass(frozen=True)
class StyleConfig:
    """CSS styling configuration."""

    accent_color: str = "#2563eb"
    badge_active_bg: str = "#def7ec"
    badge_active_fg: str = "#03543f"
    badge_stopped_bg: str = "#fde8e8"
    badge_stopped_fg: str = "#9b1c1c"
    surge_card_bg: str = "#fef2f2"
    surge_card_border: str = "#fee2e2"
    surge_title_color: str = "#991b1b"
    surge_text_color: str = "#7f1d1d"
    surge_badge_bg: str = "#ef4444"
    surge_bar_bg: str = "#fca5a5"
    surge_bar_fg: str = "#b91c1c"


class DashboardConfig:
    """Main configuration container providing access to all config sections."""

    page = PageConfig()
    api = ApiConfig()
    refresh = RefreshConfig()
    charts = ChartConfig()
    display = DisplayConfig()
    style = StyleConfig()
