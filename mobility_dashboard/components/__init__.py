"""
Components module for reusable UI elements.

Provides the status bar, live flight table, migration radar,
insights panel and styling components for the dashboard.
"""

from mobility_dashboard.components.flight_table import build_flight_table, render_flight_table
from mobility_dashboard.components.insights_panel import render_insights_panel
from mobility_dashboard.components.migration_radar import (
    format_surge_card,
    render_migration_radar,
    surge_bar_percent,
)
from mobility_dashboard.components.status_bar import (
    format_countdown,
    render_countdown,
    render_status_bar,
)
from mobility_dashboard.components.styles import apply_custom_css, apply_page_config

__all__ = [
    "apply_page_config",
    "apply_custom_css",
    "build_flight_table",
    "render_flight_table",
    "render_insights_panel",
    "format_surge_card",
    "surge_bar_percent",
    "render_migration_radar",
    "format_countdown",
    "render_countdown",
    "render_status_bar",
]
