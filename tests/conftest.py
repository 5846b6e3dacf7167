import itertools

import pytest

from honeyscan.core.analyze import Scanner
from honeyscan.core.recent import RecentScanCache
from honeyscan.errors import TransportError
from honeyscan.utils.honeypot import HoneypotGateway
from honeyscan.utils.storage import MemoryStore

HONEYPOT_ADDR = "0x" + "1" * 39 + "a"
SAFE_ADDR = "0x" + "1" * 39 + "f"


class FakeHttp:
    """Stands in for http_get_json: returns `body` or raises `error`, records calls."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def clock():
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def cache(store, clock):
    return RecentScanCache(store, clock=clock)


@pytest.fixture
def offline_http():
    return FakeHttp(error=TransportError("connection refused"))


@pytest.fixture
def offline_scanner(offline_http, cache):
    return Scanner(HoneypotGateway(http_get=offline_http), cache)
