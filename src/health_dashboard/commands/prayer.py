"""Prayer times command."""

import click

from ..coordinator import Dataset, Tab
from .base import async_command, echo_error, echo_view, open_dashboard


@click.command()
@click.option("--city", help="City to look up (defaults to the session city)")
@click.pass_context
@async_command
async def prayer(ctx: click.Context, city: str | None):
    """Show today's prayer times."""
    async with open_dashboard(ctx) as dashboard:
        await dashboard.settle()
        if city is not None:
            try:
                dashboard.set_city(city)
            except ValueError as e:
                echo_error(str(e))
                ctx.exit(1)
            # Changing the city alone does not refetch
            await dashboard.refresh(Dataset.PRAYER)

        dashboard.set_active_tab(Tab.PRAYER)
        echo_view(dashboard)
