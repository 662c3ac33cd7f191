"""health-dashboard: health insights, daily schedule and prayer times in one view."""

__version__ = "0.1.0"
