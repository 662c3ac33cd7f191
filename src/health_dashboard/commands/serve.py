"""Demo backend server command."""

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the in-memory demo backend.

    Serves the insights, schedule, metrics and prayer-time endpoints the
    dashboard talks to. Data lives in memory and is lost on exit.

    Examples:

        # Start on default port (8000)
        health-dashboard serve

        # Then, in another terminal
        health-dashboard dashboard
    """
    import uvicorn

    from ..demo import create_app

    click.echo()
    click.echo(click.style("Starting demo backend...", fg="green"))
    click.echo()
    click.echo(f"  API: http://{host}:{port}/api")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "health_dashboard.demo:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
