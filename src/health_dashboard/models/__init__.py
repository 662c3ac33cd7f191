"""Data models for health-dashboard."""

from .context import UserContext
from .health import DailyInsight, HealthMetricInput
from .prayer import PrayerTimes
from .schedule import DaySchedule, ScheduleEntry, ScheduleEntryInput, ScheduleType

__all__ = [
    "DailyInsight",
    "DaySchedule",
    "HealthMetricInput",
    "PrayerTimes",
    "ScheduleEntry",
    "ScheduleEntryInput",
    "ScheduleType",
    "UserContext",
]
