import asyncio

import click
import structlog
from rich.console import Console
from rich.markup import escape

from long_running_app import __version__
from long_running_app.config.settings import SettingsError
from long_running_app.engine.runner import run_app
from long_running_app.logging_config import configure_logging

err_console = Console(stderr=True)

log = structlog.get_logger()


@click.command()
@click.version_option(version=__version__, prog_name="long-running-app")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="LOG_LEVEL",
    show_default=True,
    help="Level for diagnostics written to stderr",
)
def cli(log_level: str) -> None:
    """Print a counter every second until max_count is reached."""
    configure_logging(level=log_level)

    try:
        asyncio.run(run_app())
    except SettingsError as e:
        log.error("invalid bound", name=e.name, value=e.value)
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
