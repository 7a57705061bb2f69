"""
Charts module for data visualization components.

Provides Plotly chart creation and rendering functions for the dashboard.
"""

from mobility_dashboard.charts.heatmap_chart import (
    create_region_heatmap_figure,
    render_region_heatmap,
)

__all__ = [
    "create_region_heatmap_figure",
    "render_region_heatmap",
]
