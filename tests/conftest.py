"""Pytest configuration and fixtures."""

from datetime import date

import httpx
import pytest

from health_dashboard.clients import InsightsClient, PrayerClient, ScheduleClient, create_http_client
from health_dashboard.coordinator import ViewCoordinator
from health_dashboard.demo import DemoStore, create_app
from health_dashboard.models.context import UserContext

BASE_URL = "http://backend.test"


class RecordingTransport(httpx.AsyncBaseTransport):
    """Wraps another transport, records every request and can inject failures.

    ``failures`` maps ``(method, path)`` to either a status code to answer
    with or an exception to raise instead of forwarding the request.
    """

    def __init__(self, inner: httpx.AsyncBaseTransport):
        self.inner = inner
        self.requests: list[httpx.Request] = []
        self.failures: dict[tuple[str, str], int | Exception] = {}

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        failure = self.failures.get((request.method, request.url.path))
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(failure, json={"detail": "injected failure"})
        return await self.inner.handle_async_request(request)

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    def reset(self) -> None:
        self.requests.clear()


@pytest.fixture
def demo_store():
    return DemoStore()


@pytest.fixture
def backend(demo_store):
    """The demo backend behind a recording transport."""
    return RecordingTransport(httpx.ASGITransport(app=create_app(demo_store)))


@pytest.fixture
def context():
    """Session context for today, which is the day the demo backend files metrics under."""
    return UserContext(user_id="demo-user-1", city="Jakarta", day=date.today())


@pytest.fixture
def make_coordinator():
    """Factory building an HTTP client plus a coordinator over ``transport``.

    Returns ``(http, coordinator)``; close ``http`` with ``async with``.
    With ``start=True`` the initial load is already running. Must be called
    from inside a running event loop.
    """

    def factory(transport, context, start: bool = True):
        http = create_http_client(BASE_URL, transport)
        clients = (InsightsClient(http), ScheduleClient(http), PrayerClient(http))
        if start:
            coordinator = ViewCoordinator.create(context, *clients)
        else:
            coordinator = ViewCoordinator(context, *clients)
        return http, coordinator

    return factory
