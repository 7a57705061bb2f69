"""
Air Traffic Mobility Dashboard - Entry Point.

A Streamlit-based dashboard that polls the air traffic analytics
backend and renders live flights, a region-to-region flow heatmap
and a migration radar comparing current traffic with history.

Usage:
    streamlit run app.py
"""

import logging

from mobility_dashboard import run_dashboard
from mobility_dashboard.components.styles import apply_custom_css, apply_page_config

# Configure logging for console output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Apply Streamlit page configuration (must be first st call)
apply_page_config()
apply_custom_css()

# Run the main dashboard
run_dashboard()
