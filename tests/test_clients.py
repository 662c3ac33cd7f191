"""Tests for the dataset clients."""

import json
from datetime import date

import httpx
import pytest

from health_dashboard.clients import InsightsClient, PrayerClient, ScheduleClient, create_http_client
from health_dashboard.coordinator import Dataset, LoadStatus, ViewCoordinator
from health_dashboard.errors import DecodeError, NetworkError, ServerError, ValidationError
from health_dashboard.models.context import UserContext
from health_dashboard.models.health import HealthMetricInput
from health_dashboard.models.schedule import ScheduleEntryInput, ScheduleType

BASE_URL = "http://backend.test"


def mock_http(handler, requests: list):
    """HTTP client whose transport records requests and answers with ``handler``."""

    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return create_http_client(BASE_URL, httpx.MockTransport(record))


@pytest.fixture
def jakarta():
    return UserContext(user_id="demo-user-1", city="Jakarta", day=date(2024, 1, 15))


class TestPrayerClient:
    """Tests for PrayerClient."""

    @pytest.mark.asyncio
    async def test_jakarta_scenario(self, jakarta):
        """Test prayer times request and ordering for Jakarta."""
        requests = []
        handler = lambda request: httpx.Response(200, json={"times": {"Fajr": "04:30", "Dhuhr": "12:10"}})

        async with mock_http(handler, requests) as http:
            result = await PrayerClient(http).fetch(jakarta)

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url.path == "/api/prayer-times"
        assert requests[0].url.query == b"city=Jakarta&date_str=2024-01-15"

        assert result.ok
        assert result.value.city == "Jakarta"
        assert list(result.value.times.items()) == [("Fajr", "04:30"), ("Dhuhr", "12:10")]

    @pytest.mark.asyncio
    async def test_not_found_is_server_error(self, jakarta):
        """Test mapping of a 404 to ServerError."""
        requests = []
        handler = lambda request: httpx.Response(404, json={"detail": "Unknown city"})

        async with mock_http(handler, requests) as http:
            result = await PrayerClient(http).fetch(jakarta)

        assert not result.ok
        assert isinstance(result.error, ServerError)
        assert result.error.status_code == 404
        assert result.value is None


class TestInsightsClient:
    """Tests for InsightsClient."""

    @pytest.mark.asyncio
    async def test_fetch_scoped_by_user_and_day(self, jakarta):
        """Test insights query parameters and decoding."""
        requests = []
        body = {"steps": 8000, "sleep_hours": None, "heart_rate_avg": 72, "advice": ["Keep going"]}
        handler = lambda request: httpx.Response(200, json=body)

        async with mock_http(handler, requests) as http:
            result = await InsightsClient(http).fetch(jakarta)

        assert requests[0].url.path == "/api/insights/daily"
        assert dict(requests[0].url.params) == {"user_id": "demo-user-1", "day": "2024-01-15"}
        assert result.ok
        assert result.value.steps == 8000
        assert result.value.sleep_hours is None
        assert result.value.advice == ["Keep going"]

    @pytest.mark.asyncio
    async def test_submit_sends_sparse_payload(self, jakarta):
        """Test that blank metric fields are left out of the payload."""
        requests = []
        handler = lambda request: httpx.Response(201)

        async with mock_http(handler, requests) as http:
            result = await InsightsClient(http).submit(jakarta, HealthMetricInput(steps="8000", sleep_hours=""))

        assert result.ok
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert requests[0].url.path == "/api/metrics"
        assert json.loads(requests[0].content) == {"user_id": "demo-user-1", "steps": 8000}

    @pytest.mark.asyncio
    async def test_invalid_metric_makes_no_request(self, jakarta):
        """Test that an invalid metric never reaches the network."""
        requests = []
        handler = lambda request: httpx.Response(201)

        async with mock_http(handler, requests) as http:
            result = await InsightsClient(http).submit(jakarta, HealthMetricInput(steps="abc"))

        assert not result.ok
        assert isinstance(result.error, ValidationError)
        assert requests == []

    @pytest.mark.asyncio
    async def test_submit_server_error(self, jakarta):
        """Test mapping of a 500 on submit."""
        requests = []
        handler = lambda request: httpx.Response(500, text="boom")

        async with mock_http(handler, requests) as http:
            result = await InsightsClient(http).submit(jakarta, HealthMetricInput(steps=10))

        assert isinstance(result.error, ServerError)
        assert result.error.status_code == 500


class TestScheduleClient:
    """Tests for ScheduleClient."""

    @pytest.mark.asyncio
    async def test_fetch_sorts_entries(self, jakarta):
        """Test schedule fetch ordering by start time."""
        requests = []
        body = {
            "items": [
                {"_id": "2", "type": "meal", "title": "Lunch", "start_time": "2024-01-15T05:00:00Z"},
                {"_id": "1", "type": "meeting", "title": "Standup", "start_time": "2024-01-15T02:00:00Z"},
            ]
        }
        handler = lambda request: httpx.Response(200, json=body)

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).fetch(jakarta)

        assert dict(requests[0].url.params) == {"user_id": "demo-user-1", "day": "2024-01-15"}
        assert [e.id for e in result.value.entries] == ["1", "2"]
        assert result.value.day == date(2024, 1, 15)

    @pytest.mark.asyncio
    async def test_submit_payload(self, jakarta):
        """Test schedule submit payload in UTC."""
        requests = []
        handler = lambda request: httpx.Response(201, json={"ok": True})
        entry = ScheduleEntryInput(type=ScheduleType.FASTING, start_time="2024-01-15T04:00:00+07:00")

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).submit(jakarta, entry)

        assert result.ok
        assert requests[0].url.path == "/api/schedule"
        assert json.loads(requests[0].content) == {
            "user_id": "demo-user-1",
            "type": "fasting",
            "title": "fasting plan",
            "start_time": "2024-01-14T21:00:00+00:00",
        }

    @pytest.mark.asyncio
    async def test_missing_start_time_makes_no_request(self, jakarta):
        """Test that an entry without a start time is refused locally."""
        requests = []
        handler = lambda request: httpx.Response(201)

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).submit(jakarta, ScheduleEntryInput(title="Call"))

        assert isinstance(result.error, ValidationError)
        assert requests == []


class TestErrorMapping:
    """Every failure mode comes back as a typed result, never an exception."""

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, jakarta):
        """Test mapping of transport failures."""
        requests = []

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_http(handler, requests) as http:
            result = await InsightsClient(http).fetch(jakarta)

        assert isinstance(result.error, NetworkError)
        assert isinstance(result.error.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json_is_decode_error(self, jakarta):
        """Test mapping of a non-JSON body."""
        requests = []
        handler = lambda request: httpx.Response(200, text="<html>oops</html>")

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).fetch(jakarta)

        assert isinstance(result.error, DecodeError)

    @pytest.mark.asyncio
    async def test_wrong_shape_is_decode_error(self, jakarta):
        """Test mapping of a payload missing required fields."""
        requests = []
        handler = lambda request: httpx.Response(200, json={"items": [{"_id": "1"}]})

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).fetch(jakarta)

        assert isinstance(result.error, DecodeError)
        assert "schedule" in str(result.error)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("start_time", [None, 1705300000])
    async def test_non_string_start_time_is_decode_error(self, jakarta, start_time):
        """Test that a null or numeric start_time is reported, not raised."""
        requests = []
        body = {"items": [{"_id": "1", "type": "meal", "start_time": start_time}]}
        handler = lambda request: httpx.Response(200, json=body)

        async with mock_http(handler, requests) as http:
            result = await ScheduleClient(http).fetch(jakarta)

        assert not result.ok
        assert isinstance(result.error, DecodeError)
        assert result.value is None

    @pytest.mark.asyncio
    async def test_malformed_schedule_marks_dataset_failed(self, jakarta):
        """Test that a malformed schedule leaves the coordinator cell failed, not loading."""
        requests = []

        def handler(request):
            if request.url.path == "/api/schedule":
                return httpx.Response(200, json={"items": [{"start_time": None}]})
            return httpx.Response(200, json={})

        async with mock_http(handler, requests) as http:
            coordinator = ViewCoordinator.create(
                jakarta, InsightsClient(http), ScheduleClient(http), PrayerClient(http)
            )
            await coordinator.settle()

        state = coordinator.state(Dataset.SCHEDULE)
        assert state.status == LoadStatus.FAILED
        assert isinstance(state.error, DecodeError)
        assert coordinator.state(Dataset.INSIGHTS).status == LoadStatus.LOADED

    @pytest.mark.asyncio
    async def test_custom_api_prefix(self, jakarta):
        """Test endpoint paths under a custom prefix."""
        requests = []
        handler = lambda request: httpx.Response(200, json={})

        async with mock_http(handler, requests) as http:
            await InsightsClient(http, api_prefix="v2/").fetch(jakarta)
            await InsightsClient(http, api_prefix="").fetch(jakarta)

        assert [r.url.path for r in requests] == ["/v2/insights/daily", "/insights/daily"]
