"""Prayer times client."""

from typing import Any

from ..models.context import UserContext
from ..models.prayer import PrayerTimes
from .base import BaseDatasetClient


class PrayerClient(BaseDatasetClient[PrayerTimes]):
    """Reads prayer times for the context city and day. Read-only."""

    fetch_path = "/prayer-times"

    @property
    def dataset_name(self) -> str:
        return "prayer"

    def fetch_params(self, context: UserContext) -> dict[str, str]:
        return {"city": context.city, "date_str": context.day_str}

    def decode(self, data: Any, context: UserContext) -> PrayerTimes:
        return PrayerTimes.from_dict(data, city=context.city, on=context.day)
