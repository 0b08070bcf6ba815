"""Shared fixtures for the city autocomplete test suite."""

import asyncio

import pytest

from city_autocomplete.config.settings import LookupConfig

# Short enough to keep the suite fast, long enough that back-to-back
# synchronous edits always land inside one quiet interval.
TEST_DEBOUNCE_MS = 20
PAST_QUIET_INTERVAL = 0.1


class ControlledLookup:
    """Lookup whose responses the test releases explicitly, in any order."""

    def __init__(self):
        self.calls = []
        self.futures = []

    async def search(self, prefix):
        future = asyncio.get_running_loop().create_future()
        self.calls.append(prefix)
        self.futures.append(future)
        return await future

    def resolve(self, index, results):
        self.futures[index].set_result(results)

    def fail(self, index, error):
        self.futures[index].set_exception(error)


class ScriptedLookup:
    """Lookup that answers immediately from a prefix -> results table."""

    def __init__(self, table=None):
        self.table = dict(table or {})
        self.calls = []

    async def search(self, prefix):
        self.calls.append(prefix)
        result = self.table.get(prefix, [])
        if isinstance(result, Exception):
            raise result
        return result


async def flush():
    """Let tasks woken by resolved futures run to completion."""
    for _ in range(5):
        await asyncio.sleep(0)


async def wait_past_quiet_interval():
    await asyncio.sleep(PAST_QUIET_INTERVAL)
    await flush()


@pytest.fixture
def config():
    return LookupConfig(credential="test-key", debounce_interval_ms=TEST_DEBOUNCE_MS)


@pytest.fixture
def controlled_lookup():
    return ControlledLookup()


@pytest.fixture
def scripted_lookup():
    return ScriptedLookup({
        "Par": ["Paris, France", "Parma, Italy"],
        "Paris, France": ["Paris, France", "Paris, United States"],
        "paris, france": ["Paris, France"],
    })
