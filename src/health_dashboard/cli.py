"""CLI entry point for health-dashboard."""

import click

from . import __version__
from .commands import dashboard, metric, prayer, schedule, serve, show
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="health-dashboard")
@click.option("--backend-url", help="Backend base URL (env: HEALTH_DASHBOARD_BACKEND_URL)")
@click.option("--user-id", help="User to show data for")
@click.option("--city", help="City for prayer times")
@click.option("--day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day to show (default: today)")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and state changes")
@click.pass_context
def main(ctx, backend_url, user_id, city, day, verbose):
    """health-dashboard: health insights, schedule and prayer times in one view.

    Example usage:

        # Start a local demo backend
        health-dashboard serve

        # Show the overview tab
        health-dashboard show

        # Record today's steps
        health-dashboard metric add --steps 8000

        # Add a workout
        health-dashboard schedule add --type workout --start "2024-01-15 17:30"

        # Browse interactively
        health-dashboard dashboard
    """
    ctx.ensure_object(dict)

    settings = get_settings()
    overrides = {
        "backend_url": backend_url,
        "user_id": user_id,
        "city": city,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)

    ctx.obj["settings"] = settings
    ctx.obj["day"] = day.date() if day else None
    configure_logging("DEBUG" if verbose else settings.log_level)


# Register commands
main.add_command(show)
main.add_command(metric)
main.add_command(schedule)
main.add_command(prayer)
main.add_command(dashboard)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
