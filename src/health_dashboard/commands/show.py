"""Show a dashboard tab."""

import click

from ..coordinator import Tab
from .base import async_command, echo_view, open_dashboard


@click.command()
@click.argument("tab", type=click.Choice([t.value for t in Tab]), default=Tab.OVERVIEW.value)
@click.pass_context
@async_command
async def show(ctx: click.Context, tab: str):
    """Load every dataset and show one tab.

    Datasets that fail to load are marked inline; the rest still render.

    Examples:

        health-dashboard show

        health-dashboard --city Bandung show prayer
    """
    async with open_dashboard(ctx) as dashboard:
        await dashboard.settle()
        dashboard.set_active_tab(tab)
        echo_view(dashboard)
