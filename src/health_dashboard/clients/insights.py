"""Daily insights client."""

from typing import Any

from ..errors import ValidationError
from ..models.context import UserContext
from ..models.health import DailyInsight, HealthMetricInput
from .base import BaseDatasetClient, Result


class InsightsClient(BaseDatasetClient[DailyInsight]):
    """Reads daily insights and records new health metrics."""

    fetch_path = "/insights/daily"
    submit_path = "/metrics"

    @property
    def dataset_name(self) -> str:
        return "insights"

    def fetch_params(self, context: UserContext) -> dict[str, str]:
        return {"user_id": context.user_id, "day": context.day_str}

    def decode(self, data: Any, context: UserContext) -> DailyInsight:
        return DailyInsight.from_dict(data)

    async def submit(self, context: UserContext, metric: HealthMetricInput) -> Result[None]:
        """Send the non-blank metrics for the current user."""
        try:
            payload = metric.to_payload(context.user_id)
        except ValidationError as e:
            return Result.failure(e)
        return await self._submit_payload(payload)
