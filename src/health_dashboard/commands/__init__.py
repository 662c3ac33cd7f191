"""CLI commands for health-dashboard."""

from .dashboard import dashboard
from .metric import metric
from .prayer import prayer
from .schedule import schedule
from .serve import serve
from .show import show

__all__ = [
    "dashboard",
    "metric",
    "prayer",
    "schedule",
    "serve",
    "show",
]
