"""
Shared test fixtures.

The provider is stubbed with ``httpx.MockTransport`` so tests run without
network access or a real API key.  ``StubProvider`` records every request
it receives, which lets tests assert that no upstream call happened.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import httpx
import pytest

TEST_KEY = "test-key"
FIXED_NOW = 1_700_000_000.5


def ok_body(
    *,
    value: int = 4200,
    distance_text: str = "4.2 km",
    duration_text: str = "10 mins",
    traffic_text: Optional[str] = "12 mins",
) -> dict[str, Any]:
    element: dict[str, Any] = {
        "status": "OK",
        "distance": {"value": value, "text": distance_text},
        "duration": {"value": 600, "text": duration_text},
    }
    if traffic_text is not None:
        element["duration_in_traffic"] = {"value": 720, "text": traffic_text}
    return {
        "status": "OK",
        "origin_addresses": ["Origin"],
        "destination_addresses": ["Destination"],
        "rows": [{"elements": [element]}],
    }


class StubProvider:
    """Callable handler for ``httpx.MockTransport``."""

    def __init__(
        self,
        body: Any = None,
        *,
        status_code: int = 200,
        raw: Optional[bytes] = None,
        error: Optional[Callable[[httpx.Request], Exception]] = None,
    ):
        self.body = body if body is not None else ok_body()
        self.status_code = status_code
        self.raw = raw
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def stub() -> StubProvider:
    return StubProvider()
