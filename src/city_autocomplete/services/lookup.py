"""
City lookup providers for the autocomplete.

Each provider answers `await search(prefix)` with Candidates in the order the
remote service returned them, and reports every kind of failure as
LookupUnavailable. The HTTP clients are blocking, so calls run in the event
loop's default executor.
"""

import asyncio
import logging
from functools import partial
from typing import Any, Dict, List, Optional

import googlemaps
import requests

from ..config.settings import LookupConfig
from ..core.state import Candidate
from ..errors import LookupUnavailable


def format_city_label(record: Dict[str, Any]) -> str:
    """Maps a GeoDB city record to its "City, Country" display label."""
    return f"{record.get('city')}, {record.get('country')}"


async def _run_blocking(func, *args, **kwargs):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))


class GeoDBCityLookup:
    """GeoDB Cities (RapidAPI) prefix search."""

    def __init__(self, config: LookupConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self.config.credential or "",
            "X-RapidAPI-Host": self.config.api_host,
        }

    def search_sync(self, prefix: str) -> List[Candidate]:
        logging.info(f"LOOKUP CALLED: geodb(namePrefix='{prefix}', limit={self.config.result_limit})")
        if not prefix:
            raise LookupUnavailable(prefix, "empty prefix")

        params = {
            "limit": self.config.result_limit,
            "types": "CITY",
            "namePrefix": prefix,
        }
        try:
            response = self.session.get(
                self.config.endpoint,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout:
            logging.error("GeoDB city lookup timed out.")
            raise LookupUnavailable(prefix, "request timed out")
        except requests.exceptions.RequestException as e:
            logging.error(f"GeoDB city lookup failed: {e}")
            raise LookupUnavailable(prefix, str(e)) from e
        except ValueError as e:
            logging.error("Failed to parse GeoDB response as JSON.")
            raise LookupUnavailable(prefix, "malformed response") from e

        if not isinstance(payload, dict):
            raise LookupUnavailable(prefix, "malformed response")
        records = payload.get("data") or []
        if not isinstance(records, list):
            raise LookupUnavailable(prefix, "malformed response")

        return [
            Candidate(label=format_city_label(record), identity=record)
            for record in records
            if isinstance(record, dict)
        ]

    async def search(self, prefix: str) -> List[Candidate]:
        return await _run_blocking(self.search_sync, prefix)


class GoogleMapsCityLookup:
    """Google Places autocomplete restricted to cities."""

    def __init__(self, config: LookupConfig, client: Optional[googlemaps.Client] = None):
        self.config = config
        if client is None:
            try:
                client = googlemaps.Client(key=config.credential, timeout=config.timeout)
                logging.info("Google Maps client initialized successfully.")
            except Exception as e:
                logging.error(f"Failed to initialize Google Maps client: {e}")
                client = None
        self.client = client

    def search_sync(self, prefix: str) -> List[Candidate]:
        logging.info(f"LOOKUP CALLED: places_autocomplete(input_text='{prefix}', types='(cities)')")
        if not prefix:
            raise LookupUnavailable(prefix, "empty prefix")
        if self.client is None:
            raise LookupUnavailable(prefix, "Maps service not available")

        try:
            predictions = self.client.places_autocomplete(input_text=prefix, types="(cities)")
        except googlemaps.exceptions.ApiError as e:
            logging.error(f"Google Places API error: {e}")
            raise LookupUnavailable(prefix, f"Maps API error: {e}") from e
        except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
            logging.error(f"Google Places request failed: {e}")
            raise LookupUnavailable(prefix, str(e)) from e

        if not isinstance(predictions, list):
            raise LookupUnavailable(prefix, "malformed response")

        results = []
        for prediction in predictions[:self.config.result_limit]:
            description = prediction.get("description") if isinstance(prediction, dict) else None
            if description:
                results.append(Candidate(label=description, identity=prediction))
        return results

    async def search(self, prefix: str) -> List[Candidate]:
        return await _run_blocking(self.search_sync, prefix)


def build_lookup(config: LookupConfig):
    """Returns the provider `config.provider` names."""
    if config.provider == "google":
        return GoogleMapsCityLookup(config)
    return GeoDBCityLookup(config)
