"""
Selection/validity gate.

Decides whether the text in the field counts as a confirmed city, either
because the user picked a suggestion or because a settled lookup for exactly
that text returned it verbatim. Matching is by display label, case-sensitive.
"""

import logging
from typing import Callable, Optional

from .state import Candidate, InputState, Query, SuggestionList

ValidityCallback = Callable[[bool], None]


class ValidityGate:
    """Owns `is_validated_selection` and reports each change of it."""

    def __init__(self, state: InputState, on_valid: Optional[ValidityCallback] = None):
        self.state = state
        self._on_valid = on_valid
        self._reported = state.is_validated_selection

    @property
    def is_valid(self) -> bool:
        return self.state.is_validated_selection

    def _set(self, valid: bool) -> None:
        self.state.is_validated_selection = valid
        if valid == self._reported:
            return
        self._reported = valid
        logging.debug(f"City field validity -> {valid} ('{self.state.raw_text}')")
        if self._on_valid is not None:
            self._on_valid(valid)

    def sync(self) -> None:
        """Report the current flag if it moved without going through the gate."""
        self._set(self.state.is_validated_selection)

    def invalidate(self) -> None:
        self._set(False)

    def on_suggestions_settled(self, query: Query, suggestions: SuggestionList) -> bool:
        valid = query.text == self.state.raw_text and suggestions.contains_label(query.text)
        self._set(valid)
        return valid

    def on_explicit_pick(self, candidate: Candidate) -> None:
        self.state.raw_text = candidate.label
        self.state.is_user_editing = False
        self._set(True)
