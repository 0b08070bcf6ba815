"""
City autocomplete component.

Wires the input tracker, the debounced query scheduler and the validity gate
together and exposes the handful of events a host drives it with.
"""

import asyncio
import logging
from typing import Callable, Optional, Sequence, Tuple, Union

from ..config.settings import LookupConfig
from .gate import ValidityGate
from .scheduler import QueryScheduler
from .state import Candidate, CityLookup, FieldStatus, InputState, Query, SuggestionList
from .tracker import InputTracker

UNVALIDATED_WARNING = "Please select a city from the list."
BLUR_HIDE_DELAY = 0.1


class CityAutocomplete:
    """Typeahead for a city field backed by a remote lookup service."""

    def __init__(
        self,
        lookup: CityLookup,
        config: Optional[LookupConfig] = None,
        *,
        label: str = "",
        name: str = "",
        value: Optional[str] = None,
        required: bool = False,
        on_change: Optional[Callable[[str], None]] = None,
        on_valid: Optional[Callable[[bool], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        """Initialize the component. `value` seeds the field without a lookup; see `mount`."""
        self.config = config or LookupConfig()
        self.label = label
        self.name = name
        self.required = required
        self._on_change = on_change
        self._loop = loop

        self.state = InputState()
        self.tracker = InputTracker(self.state, on_edit=self._handle_edit)
        self.tracker.seed(value)
        self.gate = ValidityGate(self.state, on_valid=on_valid)
        self.scheduler = QueryScheduler(
            lookup,
            self.config.debounce_interval,
            on_settled=self._handle_settled,
            on_failed=self._handle_failed,
            on_issued=self._handle_issued,
            loop=loop,
        )

        self.suggestions = SuggestionList.empty()
        self.status = FieldStatus.TYPING if self.state.raw_text else FieldStatus.EMPTY
        self.show = False
        self._hide_timer: Optional[asyncio.TimerHandle] = None

    # --- Host-facing properties ---

    @property
    def text(self) -> str:
        return self.state.raw_text

    @property
    def is_valid(self) -> bool:
        return self.state.is_validated_selection

    @property
    def loading(self) -> bool:
        return self.scheduler.busy

    @property
    def visible_suggestions(self) -> Tuple[Candidate, ...]:
        if self.show and len(self.suggestions) > 0:
            return self.suggestions.candidates
        return ()

    @property
    def warning(self) -> Optional[str]:
        if self.required and not self.is_valid and self.text:
            return UNVALIDATED_WARNING
        return None

    def is_highlighted(self, candidate: Candidate) -> bool:
        return candidate.label == self.text

    # --- Events ---

    def mount(self) -> None:
        """Look up a non-empty seeded value so it can validate by exact match."""
        if self.state.raw_text and not self.scheduler.disposed:
            self.scheduler.schedule(self.state.raw_text)
            self.status = FieldStatus.AWAITING_LOOKUP

    def set_text(self, new_text: Optional[str]) -> None:
        """The user typed, pasted or deleted."""
        self.show = True
        self.tracker.set_text(new_text)

    def pick(self, choice: Union[Candidate, str, int]) -> Candidate:
        """The user chose a suggestion. Always wins over lookups in flight."""
        candidate = self._resolve_choice(choice)
        self.scheduler.supersede()
        self.gate.on_explicit_pick(candidate)
        self.suggestions = SuggestionList.empty()
        self.show = False
        self.status = FieldStatus.VALIDATED
        logging.info(f"City picked: '{candidate.label}'")
        self._notify_change(candidate.label)
        return candidate

    def focus(self) -> None:
        self._cancel_hide()
        self.show = True

    def blur(self) -> None:
        """Hide suggestions shortly after focus leaves, so a pick in between still lands."""
        self._cancel_hide()
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError:
            self.show = False
            return
        self._hide_timer = loop.call_later(BLUR_HIDE_DELAY, self._hide)

    def dispose(self) -> None:
        """Unmount: cancel timers and discard anything still in flight."""
        self._cancel_hide()
        self.scheduler.dispose()

    async def settle(self) -> None:
        """Wait until no lookup is armed or in flight. Mostly for hosts that poll."""
        while self.scheduler.timer_pending:
            await asyncio.sleep(self.scheduler.interval / 2 or 0)
        await self.scheduler.drain()

    # --- Internal handlers ---

    def _resolve_choice(self, choice: Union[Candidate, str, int]) -> Candidate:
        """Only a suggestion currently on offer can be picked."""
        if isinstance(choice, int):
            if choice < 0:
                raise IndexError(f"Suggestion index must not be negative, got {choice}")
            return self.suggestions[choice]
        label = choice.label if isinstance(choice, Candidate) else choice
        for candidate in self.suggestions:
            if candidate.label == label:
                return candidate
        raise ValueError(f"'{label}' is not one of the current suggestions")

    def _handle_edit(self, text: str) -> None:
        self.gate.sync()
        self._notify_change(text)
        if not text:
            self.scheduler.supersede()
            self.suggestions = SuggestionList.empty()
            self.status = FieldStatus.EMPTY
            return
        self.status = FieldStatus.TYPING
        self.scheduler.schedule(text)
        if self.scheduler.timer_pending:
            self.status = FieldStatus.AWAITING_LOOKUP

    def _handle_issued(self, query: Query) -> None:
        self.status = FieldStatus.AWAITING_LOOKUP

    def _handle_settled(self, query: Query, results: Sequence[Candidate]) -> None:
        self.suggestions = SuggestionList.from_results(query, results)
        valid = self.gate.on_suggestions_settled(query, self.suggestions)
        self.status = FieldStatus.VALIDATED if valid else FieldStatus.SUGGESTIONS_SHOWN
        logging.info(f"City lookup #{query.seq} settled with {len(self.suggestions)} suggestion(s); valid={valid}")

    def _handle_failed(self, query: Query, error: Exception) -> None:
        self.suggestions = SuggestionList(query=query, candidates=())
        self.gate.invalidate()
        self.status = FieldStatus.SUGGESTIONS_SHOWN

    def _notify_change(self, text: str) -> None:
        if self._on_change is not None:
            self._on_change(text)

    def _hide(self) -> None:
        self._hide_timer = None
        self.show = False

    def _cancel_hide(self) -> None:
        if self._hide_timer is not None:
            self._hide_timer.cancel()
            self._hide_timer = None
