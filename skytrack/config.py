"""Configuration settings for skytrack."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from skytrack.models.air_traffic import BoundBox

logger = logging.getLogger("skytrack.config")


def _get_float(env_var: str, default: float) -> float:
    """Parse an environment variable into a float, falling back on bad input."""

    value = os.getenv(env_var)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %s", env_var, value, default)
        return default


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    skytrack_env: str = os.getenv("SKYTRACK_ENV", "local")
    log_level: str = os.getenv("SKYTRACK_LOG_LEVEL", "INFO")

    # OpenSky REST API
    opensky_base_url: str = os.getenv(
        "OPENSKY_BASE_URL",
        "https://opensky-network.org/api/states/all",
    )
    opensky_timeout: float = _get_float("OPENSKY_TIMEOUT", 10.0)
    opensky_username: str | None = os.getenv("OPENSKY_USERNAME") or None
    opensky_password: str | None = os.getenv("OPENSKY_PASSWORD") or None

    # Monitored area, defaults cover south-eastern Australia
    min_latitude: float = _get_float("SKYTRACK_MIN_LATITUDE", -40.110403)
    max_latitude: float = _get_float("SKYTRACK_MAX_LATITUDE", -24.267845)
    min_longitude: float = _get_float("SKYTRACK_MIN_LONGITUDE", 139.147805)
    max_longitude: float = _get_float("SKYTRACK_MAX_LONGITUDE", 154.590532)

    # Seconds between two polls
    frequency: float = _get_float("SKYTRACK_FREQUENCY", 5.0)

    def bound_box(self) -> BoundBox:
        """Return the configured monitoring area (not yet validated)."""

        return BoundBox(
            min_latitude=self.min_latitude,
            max_latitude=self.max_latitude,
            min_longitude=self.min_longitude,
            max_longitude=self.max_longitude,
        )


settings = Settings()

__all__ = ["settings", "Settings"]
