"""View coordinator: per-dataset load state, active tab and submit-then-refetch.

The coordinator owns one state cell per dataset. Cells move through
``not_loaded -> loading -> loaded | failed`` independently of each other;
a failure never touches another dataset and never discards the last good
snapshot. Mutations are never merged locally: after a successful submit the
matching dataset is fetched again and the server's answer is what gets
displayed.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .clients import InsightsClient, PrayerClient, Result, ScheduleClient
from .clients.base import BaseDatasetClient
from .errors import DatasetError
from .models.context import UserContext
from .models.health import HealthMetricInput
from .models.schedule import ScheduleEntryInput

logger = logging.getLogger(__name__)


class Dataset(str, Enum):
    """Independently fetched units of server data."""

    INSIGHTS = "insights"
    SCHEDULE = "schedule"
    PRAYER = "prayer"


class LoadStatus(str, Enum):
    """Where a dataset is in its fetch cycle."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class Tab(str, Enum):
    """Dashboard tabs."""

    OVERVIEW = "overview"
    SCHEDULE = "schedule"
    HEALTH = "health"
    PRAYER = "prayer"
    MAPS = "maps"


# Datasets each tab renders
TAB_DATASETS: dict[Tab, tuple[Dataset, ...]] = {
    Tab.OVERVIEW: (Dataset.INSIGHTS, Dataset.SCHEDULE, Dataset.PRAYER),
    Tab.SCHEDULE: (Dataset.SCHEDULE,),
    Tab.HEALTH: (Dataset.INSIGHTS,),
    Tab.PRAYER: (Dataset.PRAYER,),
    Tab.MAPS: (),
}


@dataclass(frozen=True)
class DatasetState:
    """State of one dataset.

    ``snapshot`` is the last successfully fetched value; it is kept while
    a new fetch is loading and after a fetch fails.
    """

    status: LoadStatus = LoadStatus.NOT_LOADED
    snapshot: Any = None
    error: DatasetError | None = None

    def loading(self) -> "DatasetState":
        return replace(self, status=LoadStatus.LOADING)

    def loaded(self, value: Any) -> "DatasetState":
        return DatasetState(status=LoadStatus.LOADED, snapshot=value)

    def failed(self, error: DatasetError) -> "DatasetState":
        return DatasetState(status=LoadStatus.FAILED, snapshot=self.snapshot, error=error)


@dataclass(frozen=True)
class DashboardView:
    """Immutable picture of the dashboard handed to the presentation layer."""

    active_tab: Tab
    context: UserContext
    insights: DatasetState
    schedule: DatasetState
    prayer: DatasetState

    def state(self, dataset: Dataset) -> DatasetState:
        return getattr(self, Dataset(dataset).value)


class ViewCoordinator:
    """Routes user actions to the dataset clients and keeps the state cells."""

    def __init__(
        self,
        context: UserContext,
        insights: InsightsClient,
        schedule: ScheduleClient,
        prayer: PrayerClient,
    ):
        self.context = context
        self.active_tab = Tab.OVERVIEW
        self._clients: dict[Dataset, BaseDatasetClient] = {
            Dataset.INSIGHTS: insights,
            Dataset.SCHEDULE: schedule,
            Dataset.PRAYER: prayer,
        }
        self._states: dict[Dataset, DatasetState] = {d: DatasetState() for d in Dataset}
        self._inflight: dict[Dataset, set[asyncio.Task]] = {d: set() for d in Dataset}

    @classmethod
    def create(
        cls,
        context: UserContext,
        insights: InsightsClient,
        schedule: ScheduleClient,
        prayer: PrayerClient,
    ) -> "ViewCoordinator":
        """Create a coordinator and start the initial load.

        Must be called from a running event loop. The three fetches run
        concurrently; use ``settle()`` to wait for them.
        """
        coordinator = cls(context, insights, schedule, prayer)
        coordinator.load_all()
        return coordinator

    def load_all(self) -> list[asyncio.Task]:
        """Fetch every dataset without waiting on each other."""
        return [self.refresh(dataset) for dataset in Dataset]

    def refresh(self, dataset: Dataset | str) -> asyncio.Task:
        """Fetch one dataset. Returns the task handle for the request.

        Overlapping refreshes of the same dataset are not guarded: whichever
        response arrives last ends up in the state cell.
        """
        dataset = Dataset(dataset)
        self._states[dataset] = self._states[dataset].loading()
        context = replace(self.context)
        task = asyncio.create_task(self._fetch(dataset, context), name=f"fetch-{dataset.value}")
        inflight = self._inflight[dataset]
        inflight.add(task)
        task.add_done_callback(inflight.discard)
        return task

    async def _fetch(self, dataset: Dataset, context: UserContext) -> Result:
        result = await self._clients[dataset].fetch(context)
        if result.ok:
            self._states[dataset] = self._states[dataset].loaded(result.value)
            logger.info("%s loaded", dataset.value)
        else:
            self._states[dataset] = self._states[dataset].failed(result.error)
            logger.info("%s failed: %s", dataset.value, result.error)
        return result

    async def settle(self) -> None:
        """Wait until no fetch is in flight."""
        while True:
            pending = [task for tasks in self._inflight.values() for task in tasks]
            if not pending:
                return
            await asyncio.gather(*pending)

    def in_flight(self, dataset: Dataset | str) -> int:
        return len(self._inflight[Dataset(dataset)])

    async def submit_metric(self, metric: HealthMetricInput) -> Result[None]:
        """Record health metrics, then refetch insights if the backend accepted them."""
        client: InsightsClient = self._clients[Dataset.INSIGHTS]
        result = await client.submit(replace(self.context), metric)
        return await self._after_submit(Dataset.INSIGHTS, result, metric)

    async def submit_schedule(self, entry: ScheduleEntryInput) -> Result[None]:
        """Create a schedule entry, then refetch the schedule if it was accepted."""
        client: ScheduleClient = self._clients[Dataset.SCHEDULE]
        result = await client.submit(replace(self.context), entry)
        return await self._after_submit(Dataset.SCHEDULE, result, entry)

    async def _after_submit(
        self,
        dataset: Dataset,
        result: Result[None],
        form: HealthMetricInput | ScheduleEntryInput,
    ) -> Result[None]:
        if not result.ok:
            logger.info("%s submit rejected, keeping current snapshot: %s", dataset.value, result.error)
            return result
        await self.refresh(dataset)
        form.clear()
        return result

    def set_active_tab(self, tab: Tab | str) -> Tab:
        """Switch tabs. Never fetches."""
        self.active_tab = Tab(tab)
        return self.active_tab

    def set_city(self, city: str) -> None:
        """Change the city. Prayer times are only refetched on an explicit refresh."""
        self.context.set_city(city)

    def set_user_id(self, user_id: str) -> None:
        self.context.set_user_id(user_id)

    def set_location(self, latitude: float, longitude: float) -> None:
        self.context.set_location(latitude, longitude)

    def state(self, dataset: Dataset | str) -> DatasetState:
        return self._states[Dataset(dataset)]

    def snapshot(self) -> DashboardView:
        return DashboardView(
            active_tab=self.active_tab,
            context=replace(self.context),
            insights=self._states[Dataset.INSIGHTS],
            schedule=self._states[Dataset.SCHEDULE],
            prayer=self._states[Dataset.PRAYER],
        )
