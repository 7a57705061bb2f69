"""
Dashboard module for Air Traffic Mobility visualization.

This module provides the main dashboard application for monitoring
region-to-region flight traffic served by the analytics backend.

Usage:
    from mobility_dashboard import run_dashboard
    run_dashboard()
"""

import streamlit as st

from mobility_dashboard.api.client import MobilityApiClient
from mobility_dashboard.pages.main_view import render_main_view


@st.cache_resource
def get_api_client() -> MobilityApiClient:
    """
    Backend client shared by all sessions.

    Uses Streamlit's cache_resource decorator so the underlying HTTP
    session (and its connection pool) survives reruns.
    """
    return MobilityApiClient()


def run_dashboard() -> None:
    """
    Main dashboard application entry point.

    Creates the backend client and renders the live mobility view.
    """
    render_main_view(get_api_client())


__all__ = ["get_api_client", "run_dashboard"]
