"""
System insights component.
"""

from typing import Optional

import streamlit as st

from mobility_dashboard.api.models import Insights


def render_insights_panel(insights: Optional[Insights]) -> None:
    """
    Render backend processing statistics, if the backend reported any.

    Args:
        insights: Insights from the last sync, None when unavailable.
    """
    if insights is None:
        return

    st.subheader("System Insights")
    st.json(insights.model_dump(exclude_none=True))
