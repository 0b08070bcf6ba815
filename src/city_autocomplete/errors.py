"""Exceptions raised by the city autocomplete and its collaborators."""

from typing import Optional


class CityAutocompleteError(Exception):
    """Base class for errors raised by this package."""


class LookupUnavailable(CityAutocompleteError):
    """A city lookup failed: network error, malformed response or service error."""

    def __init__(self, prefix: str, reason: str):
        super().__init__(f"City lookup for '{prefix}' unavailable: {reason}")
        self.prefix = prefix
        self.reason = reason


class ApiError(CityAutocompleteError):
    """The itinerary backend answered with a non-success status."""

    def __init__(self, status: int, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.detail = detail


class FormIncomplete(CityAutocompleteError):
    """The trip form was submitted before every required field was valid."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Form is incomplete: {', '.join(self.fields)}")
