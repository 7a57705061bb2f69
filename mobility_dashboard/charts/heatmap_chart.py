"""
Regional mobility heatmap component.

Provides the origin by destination flight volume heatmap.
"""

from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from mobility_dashboard.config import DashboardConfig
from mobility_dashboard.services.matrix_service import RegionMatrix


def create_region_heatmap_figure(matrix: RegionMatrix) -> Optional[go.Figure]:
    """
    Create a heatmap of flight counts between regions.

    Args:
        matrix: RegionMatrix from build_region_matrix().

    Returns:
        Plotly Figure object, or None if the matrix has no regions.
    """
    if matrix.is_empty():
        return None

    config = DashboardConfig.charts
    frame = matrix.to_frame()
    regions = list(matrix.regions)

    # Empty cells print "-" instead of 0
    labels = [[str(count) if count > 0 else "-" for count in row] for row in frame.values]

    fig = go.Figure(
        go.Heatmap(
            z=frame.values,
            x=regions,
            y=regions,
            text=labels,
            texttemplate="%{text}",
            colorscale=config.heatmap_color_scale,
            zmin=0,
            zmax=max(matrix.max_count, 1),
            hovertemplate="%{y} → %{x}: %{z} flights<extra></extra>",
        )
    )

    fig.update_layout(
        xaxis_title="Dest",
        yaxis_title="Origin",
        margin={"r": 0, "t": 10, "l": 0, "b": 0},
        height=max(
            config.heatmap_min_height, len(regions) * config.heatmap_row_height
        ),
    )
    fig.update_xaxes(side="top", type="category")
    fig.update_yaxes(autorange="reversed", type="category")

    return fig


def render_region_heatmap(matrix: RegionMatrix) -> None:
    """
    Render region heatmap to Streamlit.

    Args:
        matrix: RegionMatrix with the current streaming aggregates.
    """
    fig = create_region_heatmap_figure(matrix)
    if fig is None:
        st.info("No aggregation data available")
        return

    st.plotly_chart(fig, use_container_width=True)
    st.caption(f"* Intensity indicates flight volume (Max: {matrix.max_count})")
