"""
Pages module for dashboard views.

Provides the main dashboard view with live regional mobility analysis.
"""

from mobility_dashboard.pages.main_view import render_main_view

__all__ = [
    "render_main_view",
]
