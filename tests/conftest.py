"""Pytest configuration and shared fixtures."""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import pytest

from shiftswap.persistence.request_store import RequestStore
from shiftswap.requests.lifecycle import RequestLifecycle


class SteppingClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def data_file(tmp_path):
    """Backing file path inside a not-yet-existing directory."""
    return tmp_path / "data" / "requests.json"


@pytest.fixture
def store(data_file) -> RequestStore:
    return RequestStore(data_file)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2026, 1, 10, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Predictable id factory: req001, req002, ..."""
    counter = itertools.count(1)
    return lambda: f"req{next(counter):03d}"


@pytest.fixture
def lifecycle(store, clock, sequential_ids) -> RequestLifecycle:
    return RequestLifecycle(store, clock=clock, token_factory=sequential_ids)


@pytest.fixture
def sample_request_args() -> Dict[str, Any]:
    """The Jane Doe kid-pickup request."""
    return {
        "from_ts": "2026-01-12T07:00",
        "to_ts": "2026-01-12T15:00",
        "with_whom": "Jane Doe",
        "reason": "Kid pickup",
    }


@pytest.fixture
def sample_record() -> Dict[str, Any]:
    """A stored record in its on-disk JSON shape."""
    return {
        "id": "a1b2c3",
        "from": "2026-01-12T07:00",
        "to": "2026-01-12T15:00",
        "with": "Jane Doe",
        "reason": "Kid pickup",
        "status": "PENDING",
        "createdAt": "2026-01-10T09:00:00.000Z",
        "updatedAt": "2026-01-10T09:00:00.000Z",
    }
