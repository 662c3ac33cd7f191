"""Schedule client."""

from typing import Any

from ..errors import ValidationError
from ..models.context import UserContext
from ..models.schedule import DaySchedule, ScheduleEntryInput
from .base import BaseDatasetClient, Result


class ScheduleClient(BaseDatasetClient[DaySchedule]):
    """Reads a day's schedule and creates new entries."""

    fetch_path = "/schedule"
    submit_path = "/schedule"

    @property
    def dataset_name(self) -> str:
        return "schedule"

    def fetch_params(self, context: UserContext) -> dict[str, str]:
        return {"user_id": context.user_id, "day": context.day_str}

    def decode(self, data: Any, context: UserContext) -> DaySchedule:
        return DaySchedule.from_dict(data, day=context.day)

    async def submit(self, context: UserContext, entry: ScheduleEntryInput) -> Result[None]:
        """Create ``entry`` for the current user."""
        try:
            payload = entry.to_payload(context.user_id)
        except ValidationError as e:
            return Result.failure(e)
        return await self._submit_payload(payload)
