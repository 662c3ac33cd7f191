"""FastAPI application serving the demo backend."""

from datetime import date, datetime

from fastapi import APIRouter, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel

from .. import __version__
from ..models.schedule import ScheduleType
from .store import DemoStore


class MetricIn(BaseModel):
    user_id: str
    steps: float | None = None
    sleep_hours: float | None = None
    heart_rate_avg: float | None = None
    calories_in: float | None = None
    calories_out: float | None = None


class ScheduleIn(BaseModel):
    user_id: str
    type: ScheduleType
    title: str
    start_time: datetime
    location: str | None = None


router = APIRouter(prefix="/api", tags=["dashboard"])


def get_store(request: Request) -> DemoStore:
    """Get the store from app state."""
    return request.app.state.store


@router.get("/insights/daily")
async def daily_insight(request: Request, user_id: str = Query(...), day: date = Query(...)):
    return get_store(request).daily_insight(user_id, day)


@router.post("/metrics", status_code=201)
async def add_metrics(request: Request, metric: MetricIn):
    get_store(request).add_metrics(metric.user_id, metric.model_dump())
    return {"ok": True}


@router.get("/schedule")
async def list_schedule(request: Request, user_id: str = Query(...), day: date = Query(...)):
    return {"items": get_store(request).entries_for(user_id, day)}


@router.post("/schedule", status_code=201)
async def add_schedule(request: Request, entry: ScheduleIn):
    item = get_store(request).add_entry(
        entry.user_id,
        entry.type.value,
        entry.title,
        entry.start_time,
        entry.location,
    )
    return {"ok": True, "id": item["_id"]}


@router.get("/prayer-times")
async def prayer_times(request: Request, city: str = Query(...), date_str: date = Query(...)):
    times = get_store(request).prayer_times(city, date_str)
    if times is None:
        raise HTTPException(status_code=404, detail=f"Unknown city: {city}")
    return times


def create_app(store: DemoStore | None = None) -> FastAPI:
    """Create the demo backend application."""
    app = FastAPI(
        title="health-dashboard demo backend",
        description="In-memory backend for trying the dashboard locally",
        version=__version__,
    )
    app.state.store = store or DemoStore()
    app.include_router(router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
