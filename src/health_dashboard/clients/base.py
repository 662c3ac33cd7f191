"""Base class and result type for dataset clients."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from ..errors import DatasetError, DecodeError, NetworkError, ServerError
from ..models.context import UserContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one client call: either a value or a DatasetError."""

    value: T | None = None
    error: DatasetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DatasetError) -> "Result[T]":
        return cls(error=error)


class BaseDatasetClient(ABC, Generic[T]):
    """One read endpoint (and optionally one write endpoint) of the backend.

    Every call makes exactly one round trip: no retries, no caching. Any
    failure is reported through ``Result`` instead of being raised.
    """

    fetch_path: str
    submit_path: str | None = None

    def __init__(self, http: httpx.AsyncClient, api_prefix: str = "/api"):
        self.http = http
        prefix = api_prefix.strip("/")
        self.api_prefix = f"/{prefix}" if prefix else ""

    @property
    @abstractmethod
    def dataset_name(self) -> str:
        """Return the name of this dataset."""
        pass

    @abstractmethod
    def fetch_params(self, context: UserContext) -> dict[str, str]:
        """Query parameters scoping the read request."""
        pass

    @abstractmethod
    def decode(self, data: Any, context: UserContext) -> T:
        """Turn the decoded JSON body into the dataset entity."""
        pass

    async def fetch(self, context: UserContext) -> Result[T]:
        """Read the current snapshot for ``context``."""
        try:
            response = await self._request("GET", self.fetch_path, params=self.fetch_params(context))
            data = self._json(response)
            try:
                entity = self.decode(data, context)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise DecodeError(f"unexpected {self.dataset_name} payload: {e}", e) from e
        except DatasetError as e:
            logger.warning("%s fetch failed: %s", self.dataset_name, e)
            return Result.failure(e)
        return Result.success(entity)

    async def _submit_payload(self, payload: dict) -> Result[None]:
        """POST ``payload`` to the write endpoint; the body is not interpreted."""
        if self.submit_path is None:
            raise NotImplementedError(f"{self.dataset_name} is read-only")
        try:
            await self._request("POST", self.submit_path, json=payload)
        except DatasetError as e:
            logger.warning("%s submit failed: %s", self.dataset_name, e)
            return Result.failure(e)
        return Result.success()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.api_prefix}{path}"
        logger.debug("%s %s %s", method, url, kwargs.get("params") or "")
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkError(f"could not reach backend: {e}", e) from e
        if not response.is_success:
            raise ServerError(response.status_code)
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"{self.dataset_name} response is not valid JSON", e) from e


def create_http_client(base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the shared HTTP client. No timeout is imposed here."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=None,
        transport=transport,
        headers={"Accept": "application/json"},
    )
