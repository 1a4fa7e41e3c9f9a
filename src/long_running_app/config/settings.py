from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

MAX_COUNT_ENV = "max_count"

# Sentinel bound meaning "no limit".
UNBOUNDED = -1

DEFAULT_INTERVAL_SECONDS = 1.0

# 32-bit signed range.
MIN_COUNT = -(2**31)
MAX_COUNT = 2**31 - 1

# ASCII digits only, optional sign, surrounding ASCII whitespace allowed.
_INTEGER_RE = re.compile(r"[ \t\r\n\f\v]*[+-]?[0-9]+[ \t\r\n\f\v]*")


class SettingsError(Exception):
    """Raised when an environment value cannot be converted."""

    def __init__(self, name: str, value: str | None) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name}: invalid integer value {value!r}")


class RunnerSettings(BaseModel):
    """Runtime settings for the counter loop."""

    max_count: int = Field(UNBOUNDED, ge=MIN_COUNT, le=MAX_COUNT)
    interval_seconds: float = DEFAULT_INTERVAL_SECONDS

    @property
    def is_bounded(self) -> bool:
        return self.max_count != UNBOUNDED

    @field_validator("max_count", mode="before")
    @classmethod
    def parse_max_count(cls, v: Any) -> Any:
        if v is None:
            return UNBOUNDED
        if isinstance(v, str):
            if v == "":
                return UNBOUNDED
            if not _INTEGER_RE.fullmatch(v):
                raise ValueError(f"invalid literal for int() with base 10: {v!r}")
            return int(v, 10)
        return v


def load_settings(environ: Mapping[str, str] | None = None) -> RunnerSettings:
    """Build RunnerSettings from the process environment (or a given mapping)."""
    env = os.environ if environ is None else environ
    raw = env.get(MAX_COUNT_ENV)
    try:
        return RunnerSettings(max_count=raw)
    except ValidationError as e:
        raise SettingsError(MAX_COUNT_ENV, raw) from e
