"""Interactive dashboard session."""

import click
import questionary

from ..coordinator import TAB_DATASETS, Dataset, Tab, ViewCoordinator
from .base import async_command, echo_error, echo_info, echo_success, echo_view, open_dashboard
from .prompts import custom_style, prompt_metric, prompt_schedule

ACTIONS = [
    questionary.Choice("Switch tab", "tab"),
    questionary.Choice("Refresh", "refresh"),
    questionary.Choice("Add health metrics", "metric"),
    questionary.Choice("Add schedule entry", "schedule"),
    questionary.Choice("Change city", "city"),
    questionary.Choice("Change user", "user"),
    questionary.Choice("Quit", "quit"),
]


async def _switch_tab(dashboard: ViewCoordinator) -> None:
    tab = await questionary.select(
        "Tab",
        choices=[questionary.Choice(t.value.capitalize(), t) for t in Tab],
        default=dashboard.active_tab.value,
        style=custom_style,
    ).ask_async()
    if tab is not None:
        dashboard.set_active_tab(tab)


async def _refresh(dashboard: ViewCoordinator) -> None:
    datasets = TAB_DATASETS[dashboard.active_tab] or tuple(Dataset)
    if len(datasets) == 1:
        dataset = datasets[0]
    else:
        dataset = await questionary.select(
            "Refresh which dataset?",
            choices=[questionary.Choice(d.value, d) for d in datasets],
            style=custom_style,
        ).ask_async()
        if dataset is None:
            return
    await dashboard.refresh(dataset)


async def _add_metric(dashboard: ViewCoordinator) -> None:
    form = await prompt_metric()
    result = await dashboard.submit_metric(form)
    if result.ok:
        echo_success("Metrics saved")
    else:
        echo_error(f"Could not save metrics: {result.error}")


async def _add_schedule(dashboard: ViewCoordinator) -> None:
    form = await prompt_schedule()
    result = await dashboard.submit_schedule(form)
    if result.ok:
        echo_success("Schedule entry saved")
    else:
        echo_error(f"Could not save schedule entry: {result.error}")


async def _change_city(dashboard: ViewCoordinator) -> None:
    city = await questionary.text("City", default=dashboard.context.city, style=custom_style).ask_async()
    if city is None:
        return
    try:
        dashboard.set_city(city)
    except ValueError as e:
        echo_error(str(e))
        return
    echo_info(f"City set to {city}. Refresh prayer times to load it.")


async def _change_user(dashboard: ViewCoordinator) -> None:
    user_id = await questionary.text("User ID", default=dashboard.context.user_id, style=custom_style).ask_async()
    if user_id is None:
        return
    try:
        dashboard.set_user_id(user_id)
    except ValueError as e:
        echo_error(str(e))
        return
    echo_info(f"User set to {user_id}. Refresh to load their data.")


HANDLERS = {
    "tab": _switch_tab,
    "refresh": _refresh,
    "metric": _add_metric,
    "schedule": _add_schedule,
    "city": _change_city,
    "user": _change_user,
}


@click.command()
@click.pass_context
@async_command
async def dashboard(ctx: click.Context):
    """Run the dashboard interactively.

    Data loads in the background while the menu is open; tabs that are
    still loading show a placeholder until you redraw them.
    """
    async with open_dashboard(ctx) as coordinator:
        while True:
            echo_view(coordinator)
            action = await questionary.select(
                "What next?",
                choices=ACTIONS,
                style=custom_style,
            ).ask_async()
            if action is None or action == "quit":
                break
            try:
                await HANDLERS[action](coordinator)
            except click.Abort:
                echo_info("Cancelled")
