"""
Debounced city autocomplete for the travel-itinerary planner.
"""

from .config import LookupConfig, load_config
from .core import CityAutocomplete, Candidate, FieldStatus, TripForm
from .errors import ApiError, FormIncomplete, LookupUnavailable

__version__ = "0.1.0"

__all__ = [
    'LookupConfig',
    'load_config',
    'CityAutocomplete',
    'Candidate',
    'FieldStatus',
    'TripForm',
    'ApiError',
    'FormIncomplete',
    'LookupUnavailable'
]
