"""
Configuration settings and constants for the city autocomplete.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

# API Endpoints
GEODB_API_URL = "https://wft-geo-db.p.rapidapi.com/v1/geo/cities"
GEODB_API_HOST = "wft-geo-db.p.rapidapi.com"

# Lookup defaults
DEFAULT_PROVIDER = "geodb"
DEFAULT_RESULT_LIMIT = 5
DEFAULT_DEBOUNCE_MS = 300
DEFAULT_TIMEOUT_SECONDS = 10.0

LOG_FORMAT = '%(asctime)s - [%(levelname)s] - %(message)s'

PROVIDERS = ("geodb", "google")


@dataclass(frozen=True)
class LookupConfig:
    """Everything a lookup provider and the debounce timer need."""
    endpoint: str = GEODB_API_URL
    credential: Optional[str] = None
    result_limit: int = DEFAULT_RESULT_LIMIT
    debounce_interval_ms: int = DEFAULT_DEBOUNCE_MS
    provider: str = DEFAULT_PROVIDER
    api_host: str = GEODB_API_HOST
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        if self.result_limit < 1:
            raise ValueError(f"result_limit must be at least 1, got {self.result_limit}")
        if self.debounce_interval_ms < 0:
            raise ValueError(f"debounce_interval_ms must not be negative, got {self.debounce_interval_ms}")
        if self.provider not in PROVIDERS:
            raise ValueError(f"Unknown lookup provider '{self.provider}'. Expected one of {PROVIDERS}")

    @property
    def debounce_interval(self) -> float:
        """Quiet interval in seconds, as asyncio timers expect."""
        return self.debounce_interval_ms / 1000.0


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"Ignoring non-integer {name}={raw!r}; using {default}.")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.warning(f"Ignoring non-numeric {name}={raw!r}; using {default}.")
        return default


def load_config() -> LookupConfig:
    """Build a LookupConfig from environment variables.

    A new object is returned on every call so each component gets its own
    configuration.
    """
    provider = os.environ.get("CITY_LOOKUP_PROVIDER", DEFAULT_PROVIDER).strip().lower()
    # The Google client has a fixed endpoint; only GeoDB reads `endpoint`.
    if provider == "google":
        credential = os.environ.get("MAPS_API_KEY")
    else:
        credential = os.environ.get("RAPIDAPI_KEY")

    return LookupConfig(
        endpoint=os.environ.get("GEODB_API_URL", GEODB_API_URL),
        credential=credential,
        result_limit=_env_int("CITY_LOOKUP_LIMIT", DEFAULT_RESULT_LIMIT),
        debounce_interval_ms=_env_int("CITY_LOOKUP_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
        provider=provider,
        api_host=os.environ.get("GEODB_API_HOST", GEODB_API_HOST),
        timeout=_env_float("CITY_LOOKUP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
    )


def itinerary_api_url() -> Optional[str]:
    """Base URL of the itinerary backend, if configured."""
    return os.environ.get("ITINERARY_API_URL")


def validate_config(config: LookupConfig) -> bool:
    """Validate that the selected provider has the credential it needs."""
    missing_keys = []

    if not config.credential:
        if config.provider == "google":
            missing_keys.append("MAPS_API_KEY")
            logging.warning("MAPS_API_KEY not found. Google Maps city lookups will fail.")
        else:
            missing_keys.append("RAPIDAPI_KEY")
            logging.warning("RAPIDAPI_KEY not found. GeoDB city lookups will fail.")
    if not config.endpoint:
        missing_keys.append("GEODB_API_URL")

    if missing_keys:
        logging.error(f"Missing required settings: {', '.join(missing_keys)}")
        return False

    return True


def configure_logging(level: int = logging.INFO) -> None:
    """Logging Configuration"""
    logging.basicConfig(level=level, format=LOG_FORMAT)
