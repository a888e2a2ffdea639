import json
import threading
from typing import Callable, List, Optional
from unittest.mock import Mock

import httpx
import pytest

from whackerlink_reporter.models import Site


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network access")


class RecordingCollector:
    """
    In-memory collector behind an httpx.MockTransport.

    Records every request and answers with a fixed status, or with whatever
    the optional responder returns.
    """

    def __init__(
        self,
        status_code: int = 200,
        responder: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        self.status_code = status_code
        self.responder = responder
        self.requests: List[httpx.Request] = []
        self._lock = threading.Lock()

    def handle(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)

        if self.responder:
            return self.responder(request)

        return httpx.Response(self.status_code)

    def client(self, base_url: str = "http://collector.test:9000") -> httpx.Client:
        return httpx.Client(base_url=base_url, transport=httpx.MockTransport(self.handle))

    def bodies(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def collector() -> RecordingCollector:
    return RecordingCollector()


@pytest.fixture
def logger() -> Mock:
    """
    Stand-in for the application logger.
    """
    return Mock(spec=["info", "error"])


@pytest.fixture
def site() -> Site:
    return Site(name="Tower 1", system_id="001", site_id="1", control_channel="851.0125")


@pytest.fixture
def collector_factory():
    return RecordingCollector
