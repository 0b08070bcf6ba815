"""Trip request form hosting two city autocompletes."""

import logging
from typing import Any, Dict, List, Optional

from ..config.settings import LookupConfig
from ..errors import FormIncomplete
from .autocomplete import CityAutocomplete
from .state import CityLookup

MODELS = ("local", "groq", "openai")
CITY_FIELDS = ("from_location", "to_location")


class TripForm:
    """Holds the itinerary request fields and knows when it may be submitted."""

    def __init__(self, lookup: CityLookup, config: Optional[LookupConfig] = None,
                 from_location: str = "", to_location: str = ""):
        self.values: Dict[str, Any] = {
            "from_location": from_location,
            "to_location": to_location,
            "budget": None,
            "dates": "",
            "model": "local",
        }
        self.validity: Dict[str, bool] = {name: False for name in CITY_FIELDS}
        self.fields: Dict[str, CityAutocomplete] = {
            "from_location": self._city_field(lookup, config, "from_location", "From", from_location),
            "to_location": self._city_field(lookup, config, "to_location", "To", to_location),
        }

    def _city_field(self, lookup, config, name, label, value) -> CityAutocomplete:
        def on_change(text: str) -> None:
            self.values[name] = text

        def on_valid(valid: bool) -> None:
            self.validity[name] = valid

        return CityAutocomplete(
            lookup,
            config,
            label=label,
            name=name,
            value=value,
            required=True,
            on_change=on_change,
            on_valid=on_valid,
        )

    def mount(self) -> None:
        """Look up pre-filled cities so an exact match can validate. Needs a running loop."""
        for field in self.fields.values():
            field.mount()

    def set_budget(self, budget: float) -> None:
        self.values["budget"] = budget

    def set_dates(self, dates: str) -> None:
        self.values["dates"] = dates

    def set_model(self, model: str) -> None:
        if model not in MODELS:
            raise ValueError(f"Unknown model '{model}'. Expected one of {MODELS}")
        self.values["model"] = model

    def missing_fields(self) -> List[str]:
        missing = [name for name in CITY_FIELDS if not self.validity[name]]
        budget = self.values["budget"]
        if budget is None or budget <= 0:
            missing.append("budget")
        if not str(self.values["dates"]).strip():
            missing.append("dates")
        return missing

    def can_submit(self) -> bool:
        return not self.missing_fields()

    def build_request(self) -> Dict[str, Any]:
        missing = self.missing_fields()
        if missing:
            raise FormIncomplete(missing)
        return {
            "from_location": self.values["from_location"],
            "to_location": self.values["to_location"],
            "budget": self.values["budget"],
            "dates": self.values["dates"],
            "model": self.values["model"],
        }

    def submit(self, client, token: Optional[str] = None) -> Dict[str, Any]:
        request = self.build_request()
        logging.info(f"Submitting itinerary request {request['from_location']} -> {request['to_location']}")
        return client.generate_itinerary(request, token=token)

    def dispose(self) -> None:
        for field in self.fields.values():
            field.dispose()
