"""Dataset clients for the dashboard backend."""

from .base import BaseDatasetClient, Result, create_http_client
from .insights import InsightsClient
from .prayer import PrayerClient
from .schedule import ScheduleClient

__all__ = [
    "BaseDatasetClient",
    "InsightsClient",
    "PrayerClient",
    "Result",
    "ScheduleClient",
    "create_http_client",
]
