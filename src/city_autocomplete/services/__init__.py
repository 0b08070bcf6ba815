"""
External services used by the city autocomplete: city lookups and the itinerary backend.
"""

from .lookup import GeoDBCityLookup, GoogleMapsCityLookup, build_lookup, format_city_label
from .api import ItineraryApiClient, ItineraryRequest

__all__ = [
    'GeoDBCityLookup',
    'GoogleMapsCityLookup',
    'build_lookup',
    'format_city_label',
    'ItineraryApiClient',
    'ItineraryRequest'
]
