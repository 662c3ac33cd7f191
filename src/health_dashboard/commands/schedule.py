"""Schedule commands."""

import click

from ..coordinator import Tab
from ..models.schedule import ScheduleEntryInput, ScheduleType
from .base import async_command, echo_error, echo_success, echo_view, open_dashboard
from .prompts import prompt_schedule


@click.group()
def schedule():
    """Manage today's schedule."""
    pass


@schedule.command("add")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([t.value for t in ScheduleType]),
    default=ScheduleType.MEETING.value,
    show_default=True,
    help="Kind of entry",
)
@click.option("--title", default="", help="Title (defaults to '<type> plan')")
@click.option("--start", "start_time", help="Start time in local time, e.g. '2024-01-15 09:30'")
@click.option("--location", default="", help="Where it happens")
@click.pass_context
@async_command
async def add(ctx: click.Context, entry_type: str, title: str, start_time: str | None, location: str):
    """Create a schedule entry and show the refreshed agenda.

    When --start is missing the remaining fields are asked interactively.
    """
    form = ScheduleEntryInput(type=entry_type, title=title, start_time=start_time, location=location)
    if not start_time:
        form = await prompt_schedule(form)

    async with open_dashboard(ctx) as dashboard:
        await dashboard.settle()
        result = await dashboard.submit_schedule(form)
        if not result.ok:
            echo_error(f"Could not save schedule entry: {result.error}")
            ctx.exit(1)

        echo_success("Schedule entry saved")
        dashboard.set_active_tab(Tab.SCHEDULE)
        echo_view(dashboard)


@schedule.command("list")
@click.pass_context
@async_command
async def list_schedule(ctx: click.Context):
    """Show today's agenda."""
    async with open_dashboard(ctx) as dashboard:
        await dashboard.settle()
        dashboard.set_active_tab(Tab.SCHEDULE)
        echo_view(dashboard)
