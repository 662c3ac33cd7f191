"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from datetime import date
from functools import wraps
from typing import AsyncIterator

import click

from ..clients import InsightsClient, PrayerClient, ScheduleClient, create_http_client
from ..config import Settings
from ..coordinator import ViewCoordinator
from ..models.context import UserContext
from ..views import render_tab


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def build_context(settings: Settings, day: date | None = None) -> UserContext:
    """Create the session context from settings; ``day`` defaults to today."""
    context = UserContext(
        user_id=settings.user_id,
        city=settings.city,
        latitude=settings.latitude,
        longitude=settings.longitude,
    )
    if day is not None:
        context.set_day(day)
    return context


@asynccontextmanager
async def open_dashboard(ctx: click.Context) -> AsyncIterator[ViewCoordinator]:
    """Open an HTTP session and a coordinator whose initial load is under way.

    In-flight fetches are awaited before the session closes.
    """
    settings: Settings = ctx.obj["settings"]
    try:
        context = build_context(settings, ctx.obj.get("day"))
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    async with create_http_client(settings.backend_url, ctx.obj.get("transport")) as http:
        coordinator = ViewCoordinator.create(
            context,
            InsightsClient(http, settings.api_prefix),
            ScheduleClient(http, settings.api_prefix),
            PrayerClient(http, settings.api_prefix),
        )
        try:
            yield coordinator
        finally:
            await coordinator.settle()


def echo_view(coordinator: ViewCoordinator) -> None:
    """Print the coordinator's active tab."""
    click.echo()
    click.echo(render_tab(coordinator.snapshot()))
    click.echo()


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)
