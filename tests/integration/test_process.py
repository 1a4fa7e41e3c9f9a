"""Runs the app as a real subprocess and checks stdout, timing, and exit status."""

import os
import subprocess
import sys
import time

import pytest

CMD = [sys.executable, "-m", "long_running_app"]


def _env(**overrides: str) -> dict[str, str]:
    env = {k: v for k, v in os.environ.items() if k not in ("max_count", "LOG_LEVEL")}
    env.update(overrides)
    return env


class TestProcess:
    def test_bounded_run_exits_cleanly(self) -> None:
        started = time.monotonic()
        result = subprocess.run(
            CMD, env=_env(max_count="2"), capture_output=True, text=True, timeout=30
        )
        elapsed = time.monotonic() - started

        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "Start long running app",
            "Counter: 1",
            "Counter: 2",
            "End long running app",
        ]
        assert elapsed >= 2.0

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive_bound(self, value: str) -> None:
        result = subprocess.run(
            CMD, env=_env(max_count=value), capture_output=True, text=True, timeout=30
        )
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["Start long running app", "End long running app"]

    def test_malformed_bound_fails(self) -> None:
        result = subprocess.run(
            CMD, env=_env(max_count="abc"), capture_output=True, text=True, timeout=30
        )
        assert result.returncode != 0
        assert result.stdout.splitlines() == ["Start long running app"]
        assert "max_count" in result.stderr

    def test_unbounded_runs_until_killed(self) -> None:
        proc = subprocess.Popen(
            CMD, env=_env(), stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True
        )
        try:
            lines = [proc.stdout.readline().rstrip("\n") for _ in range(3)]
            assert proc.poll() is None
        finally:
            proc.kill()
            proc.wait(timeout=10)
            proc.stdout.close()

        assert lines == ["Start long running app", "Counter: 1", "Counter: 2"]
