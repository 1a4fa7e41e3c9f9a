"""CounterRunner: prints an incrementing counter until an optional bound is reached."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping

import click

from long_running_app.config.settings import (
    DEFAULT_INTERVAL_SECONDS,
    UNBOUNDED,
    RunnerSettings,
    load_settings,
)
from long_running_app.logging_config import get_logger

START_MARKER = "Start long running app"
END_MARKER = "End long running app"

Echo = Callable[[str], None]
Sleep = Callable[[float], Awaitable[None]]


class CounterRunner:
    """Runs the counter loop for one process lifetime."""

    def __init__(
        self,
        max_count: int = UNBOUNDED,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        echo: Echo | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self.max_count = max_count
        self.interval_seconds = interval_seconds
        self._echo = echo or click.echo
        self._sleep = sleep or asyncio.sleep
        self._counter = 0
        self._log = get_logger(component="runner")

    @classmethod
    def from_settings(
        cls,
        settings: RunnerSettings,
        echo: Echo | None = None,
        sleep: Sleep | None = None,
    ) -> CounterRunner:
        return cls(
            max_count=settings.max_count,
            interval_seconds=settings.interval_seconds,
            echo=echo,
            sleep=sleep,
        )

    @property
    def counter(self) -> int:
        return self._counter

    def should_continue(self) -> bool:
        return self.max_count == UNBOUNDED or self._counter < self.max_count

    async def run(self) -> int:
        """Loop until the bound is met. Never returns when unbounded."""
        while self.should_continue():
            self._counter += 1
            self._echo(f"Counter: {self._counter}")
            self._log.debug("tick", counter=self._counter)
            await self._sleep(self.interval_seconds)
        return self._counter


async def run_app(
    environ: Mapping[str, str] | None = None,
    echo: Echo | None = None,
    sleep: Sleep | None = None,
) -> int:
    """Print the start marker, run the counter, print the end marker.

    Raises SettingsError if ``max_count`` is malformed; in that case only the
    start marker has been written.
    """
    echo = echo or click.echo
    echo(START_MARKER)

    settings = load_settings(environ)
    log = get_logger(component="runner")
    log.info("runner starting", max_count=settings.max_count, bounded=settings.is_bounded)

    runner = CounterRunner.from_settings(settings, echo=echo, sleep=sleep)
    final = await runner.run()

    log.info("runner finished", counter=final)
    echo(END_MARKER)
    return final
