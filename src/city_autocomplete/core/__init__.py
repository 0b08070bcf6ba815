"""
Core of the city autocomplete: state, tracker, scheduler, gate and the component.
"""

from .state import Candidate, CityLookup, FieldStatus, InputState, Query, SuggestionList
from .autocomplete import CityAutocomplete, UNVALIDATED_WARNING
from .form import TripForm

__all__ = [
    'Candidate',
    'CityLookup',
    'FieldStatus',
    'InputState',
    'Query',
    'SuggestionList',
    'CityAutocomplete',
    'UNVALIDATED_WARNING',
    'TripForm'
]
