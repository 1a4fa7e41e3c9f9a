import pytest

from long_running_app.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging()


@pytest.fixture
def echoed() -> list[str]:
    return []


class FakeSleep:
    """Records requested delays without waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()
