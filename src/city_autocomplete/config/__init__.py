"""
Configuration settings and constants for the city autocomplete.
"""

from .settings import (
    GEODB_API_URL,
    GEODB_API_HOST,
    LookupConfig,
    load_config,
    itinerary_api_url,
    validate_config,
    configure_logging
)

__all__ = [
    'GEODB_API_URL',
    'GEODB_API_HOST',
    'LookupConfig',
    'load_config',
    'itinerary_api_url',
    'validate_config',
    'configure_logging'
]
