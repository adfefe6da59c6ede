"""Environment-driven settings.

Environment variables:
    SLIPSYNC_LOG_LEVEL: Log level name for structlog filtering (default: INFO)
    SLIPSYNC_TIMEZONE: Fallback store timezone for sales summaries (default: UTC)
    SLIPSYNC_TIME_RANGE: Default revenue series window, 7d/30d/90d (default: 90d)
"""

import os
from dataclasses import dataclass

from .errors import InvalidArgumentError, errmsg

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_TIME_RANGE = "90d"

TIME_RANGES = {"7d": 7, "30d": 30, "90d": 90}


@dataclass(frozen=True)
class Settings:
    log_level: str
    timezone: str
    time_range: str

    @property
    def window_days(self) -> int:
        return TIME_RANGES[self.time_range]


def get_settings() -> Settings:
    """Read settings from the environment."""
    time_range = os.environ.get("SLIPSYNC_TIME_RANGE", DEFAULT_TIME_RANGE).strip().lower() or DEFAULT_TIME_RANGE
    if time_range not in TIME_RANGES:
        raise InvalidArgumentError(
            errmsg.UNKNOWN_TIME_RANGE.format(value=time_range, allowed=sorted(TIME_RANGES))
        )

    return Settings(
        log_level=os.environ.get("SLIPSYNC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        or DEFAULT_LOG_LEVEL,
        timezone=os.environ.get("SLIPSYNC_TIMEZONE", DEFAULT_TIMEZONE).strip() or DEFAULT_TIMEZONE,
        time_range=time_range,
    )
