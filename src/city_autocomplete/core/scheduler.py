"""
Debounced lookup scheduling with stale-response suppression.

Text changes re-arm a single timer; only when the timer fires uninterrupted is
a lookup issued. Every issued lookup is tagged with a sequence number, and a
completed lookup is applied only if its number is still the active one. Late
responses are never cancelled at the transport, they are ignored here.
"""

import asyncio
import logging
from typing import Callable, Optional, Sequence, Set

from .state import Candidate, CityLookup, Query

SettledCallback = Callable[[Query, Sequence[Candidate]], None]
FailedCallback = Callable[[Query, Exception], None]
IssuedCallback = Callable[[Query], None]


class QueryScheduler:
    """Turns a burst of text changes into at most one lookup per quiet interval."""

    def __init__(
        self,
        lookup: CityLookup,
        interval: float,
        on_settled: SettledCallback,
        on_failed: FailedCallback,
        on_issued: Optional[IssuedCallback] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._lookup = lookup
        self._interval = max(0.0, float(interval))
        self._on_settled = on_settled
        self._on_failed = on_failed
        self._on_issued = on_issued
        self._loop = loop

        self._timer: Optional[asyncio.TimerHandle] = None
        self._pending_text: Optional[str] = None
        self._seq = 0
        self._active: Optional[Query] = None
        self._tasks: Set[asyncio.Task] = set()
        self._disposed = False
        self.issued_count = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def active_query(self) -> Optional[Query]:
        return self._active

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    @property
    def in_flight(self) -> bool:
        return self._active is not None

    @property
    def busy(self) -> bool:
        """True while a lookup is either armed or awaiting its response."""
        return self.timer_pending or self.in_flight

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, text: str) -> None:
        """Re-arm the debounce timer for `text`.

        Any query already in flight is superseded immediately: its response
        no longer matches the text in the field. Empty text never arms.
        """
        self.supersede()
        if self._disposed or not text:
            return
        self._pending_text = text
        self._timer = self._get_loop().call_later(self._interval, self._fire)

    def supersede(self) -> None:
        """Cancel the pending timer and make any in-flight response stale."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._pending_text = None
        if self._active is not None:
            logging.debug(f"Superseding in-flight city lookup #{self._active.seq} for '{self._active.text}'.")
            self._active = None

    def dispose(self) -> None:
        """Stop for good. Responses still in flight will be discarded."""
        self.supersede()
        self._disposed = True

    def _fire(self) -> None:
        self._timer = None
        text = self._pending_text
        self._pending_text = None
        if self._disposed or not text:
            return

        self._seq += 1
        query = Query(text=text, seq=self._seq)
        self._active = query
        self.issued_count += 1
        logging.info(f"Issuing city lookup #{query.seq} for '{query.text}'")
        if self._on_issued is not None:
            self._on_issued(query)

        task = self._get_loop().create_task(self._run(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _is_current(self, query: Query) -> bool:
        return self._active is not None and self._active.seq == query.seq

    async def _run(self, query: Query) -> None:
        try:
            results = await self._lookup.search(query.text)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if not self._is_current(query):
                logging.debug(f"Discarding failure of stale city lookup #{query.seq}: {e}")
                return
            self._active = None
            logging.warning(f"City lookup #{query.seq} for '{query.text}' failed; showing no suggestions. {e}")
            self._on_failed(query, e)
            return

        if not self._is_current(query):
            logging.debug(f"Discarding stale city lookup #{query.seq} for '{query.text}'.")
            return
        self._active = None
        try:
            self._on_settled(query, results)
        except Exception as e:
            logging.warning(f"City lookup #{query.seq} for '{query.text}' returned an unusable result; showing no suggestions. {e}")
            self._on_failed(query, e)

    async def drain(self) -> None:
        """Wait for every lookup task started so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
