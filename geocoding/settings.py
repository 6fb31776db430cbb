"""Environment-driven configuration for the geocoding client."""

import os

from pydantic import BaseModel

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class Settings(BaseModel):
    """Client settings resolved from the environment."""

    base_url: str = GEOCODE_URL
    timeout: float = 10.0


def load_settings() -> Settings:
    """Read settings from GEOCODING_* environment variables.

    Returns:
        A Settings model with defaults for any unset variable.
    """
    return Settings(
        base_url=os.getenv("GEOCODING_URL", GEOCODE_URL),
        timeout=float(os.getenv("GEOCODING_TIMEOUT", "10")),
    )


settings = load_settings()
