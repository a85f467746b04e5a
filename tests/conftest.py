from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

from isspass.domain.entities.passes import Coordinates

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def sample_coordinates() -> Coordinates:
    return Coordinates(latitude="49.2", longitude="-123.1")


@pytest.fixture()
def sample_passes() -> List[Dict[str, Any]]:
    return [
        {"duration": 600, "risetime": 1700000000},
        {"duration": 541, "risetime": 1700005800},
    ]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.host == host]


@pytest.fixture()
def recording_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport
