"""Health metric commands."""

import click

from ..coordinator import Tab
from ..models.health import HealthMetricInput
from .base import async_command, echo_error, echo_success, echo_view, open_dashboard
from .prompts import prompt_metric


@click.group()
def metric():
    """Record health metrics."""
    pass


@metric.command("add")
@click.option("--steps", help="Steps walked today")
@click.option("--sleep-hours", help="Hours slept")
@click.option("--heart-rate-avg", help="Average heart rate (bpm)")
@click.option("--calories-in", help="Calories eaten")
@click.option("--calories-out", help="Calories burned")
@click.pass_context
@async_command
async def add(ctx: click.Context, **values):
    """Submit health metrics and show the refreshed health summary.

    Without any option an interactive form is shown. Blank values are not
    sent.
    """
    form = HealthMetricInput(**values)
    if form.is_empty():
        form = await prompt_metric()

    async with open_dashboard(ctx) as dashboard:
        await dashboard.settle()
        result = await dashboard.submit_metric(form)
        if not result.ok:
            echo_error(f"Could not save metrics: {result.error}")
            ctx.exit(1)

        echo_success("Metrics saved")
        dashboard.set_active_tab(Tab.HEALTH)
        echo_view(dashboard)
